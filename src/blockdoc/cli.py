import argparse
import logging
import sys
from pathlib import Path

import blockdoc.plugins  # Ensure plugins are registered
from blockdoc.core.config import ConverterConfig
from blockdoc.core.engine import CoreEngine
from blockdoc.core.errors import BlockConverterError


def _load_config(args: argparse.Namespace) -> ConverterConfig:
    cfg = ConverterConfig.load(Path(args.config) if args.config else None)
    if args.strict_types:
        cfg.strict_types = True
    if args.indent is not None:
        cfg.indent = args.indent
    if args.utf8_bom:
        cfg.utf8_bom = True
    if args.verbose:
        cfg.log_level = "DEBUG"
    return cfg


def _read_payload(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8-sig")


def convert_cmd(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    out_dir = Path(args.output_dir) if args.output_dir else None
    if out_dir:
        out_dir.mkdir(parents=True, exist_ok=True)

    out_ext = args.out_type if args.out_type.startswith(".") else f".{args.out_type}"

    failed = 0
    for f in args.files:
        fpath = Path(f)
        try:
            if out_dir:
                target = out_dir / f"{fpath.stem}{out_ext}"
            else:
                target = fpath.with_suffix(out_ext)

            if target.resolve() == fpath.resolve():
                raise BlockConverterError("Output would overwrite the input file")

            print(f"Converting: {fpath.name}")
            CoreEngine.convert(str(fpath), str(target), cfg.read_options(), cfg.write_options())
            print(f"Successfully converted {fpath.name}")
        except (BlockConverterError, OSError) as e:
            failed += 1
            print(f"Failed to convert {fpath.name}: {e}", file=sys.stderr)

    return 1 if failed else 0


def encode_cmd(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    options = {**cfg.read_options(), **cfg.write_options()}
    print(CoreEngine.encode_to_blocks(_read_payload(args.source), options))
    return 0


def decode_cmd(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    options = {**cfg.read_options(), **cfg.write_options()}
    print(CoreEngine.decode_to_html(_read_payload(args.source), options))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Sir Trevor block document converter")
    parser.add_argument("--config", default="", help="Path to a JSON config file")
    parser.add_argument("--strict-types", action="store_true", help="Reject unknown block types")
    parser.add_argument("--indent", type=int, default=None, help="Indent JSON output")
    parser.add_argument("--utf8-bom", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert files")
    convert_parser.add_argument("files", nargs="+", help="Input files (.html or .json)")
    convert_parser.add_argument("--out-type", default="json", choices=["json", "html"])
    convert_parser.add_argument("--output-dir", default="", help="Output directory")

    encode_parser = subparsers.add_parser("encode", help="HTML to block document JSON")
    encode_parser.add_argument("source", nargs="?", default="-", help="HTML file, or - for stdin")

    decode_parser = subparsers.add_parser("decode", help="Block document JSON to HTML")
    decode_parser.add_argument("source", nargs="?", default="-", help="JSON file, or - for stdin")

    args = parser.parse_args()
    cfg = _load_config(args)
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    commands = {"convert": convert_cmd, "encode": encode_cmd, "decode": decode_cmd}
    try:
        code = commands[args.command](args, cfg)
    except (BlockConverterError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        code = 1
    sys.exit(code)

if __name__ == "__main__":
    main()
