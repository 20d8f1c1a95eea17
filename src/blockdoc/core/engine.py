import logging
from typing import Any, Dict, Optional, Tuple, Type
from pathlib import Path

from blockdoc.core.errors import BlockConverterError, UnsupportedExtensionError, ConversionFailedError
from blockdoc.core.markdown import MarkdownConverter
from blockdoc.plugins.registry import InputReader, OutputWriter, PluginRegistry

logger = logging.getLogger(__name__)


class CoreEngine:
    """
    Orchestrates the conversion between block document formats.
    Does not know about parsing logic or rendering logic, only routing.
    """

    @staticmethod
    def _route(in_ext: str, out_ext: str) -> Tuple[Type[InputReader], Type[OutputWriter]]:
        ReaderCls = PluginRegistry.get_reader(in_ext)
        if not ReaderCls:
            raise UnsupportedExtensionError(f"No reader found for extension '{in_ext}'")

        WriterCls = PluginRegistry.get_writer(out_ext)
        if not WriterCls:
            raise UnsupportedExtensionError(f"No writer found for extension '{out_ext}'")

        return ReaderCls, WriterCls

    @staticmethod
    def convert(
        input_path: str,
        output_path: str,
        read_options: Dict[str, Any],
        write_options: Dict[str, Any],
        markdown: Optional[MarkdownConverter] = None,
    ) -> None:
        """
        Convert file at `input_path` to `output_path`, routed by file extension.
        read_options and write_options pass format-specific toggles (e.g. strict_types, indent).
        """
        ReaderCls, WriterCls = CoreEngine._route(Path(input_path).suffix, Path(output_path).suffix)

        try:
            model = ReaderCls(markdown).read(input_path, read_options)
            WriterCls(markdown).write(model, output_path, write_options)
        except BlockConverterError:
            raise
        except Exception as e:
            raise ConversionFailedError(f"Conversion failed: {e}") from e

    @staticmethod
    def convert_text(
        payload: str,
        in_ext: str,
        out_ext: str,
        read_options: Optional[Dict[str, Any]] = None,
        write_options: Optional[Dict[str, Any]] = None,
        markdown: Optional[MarkdownConverter] = None,
    ) -> str:
        """Same routing as `convert`, for in-memory payloads."""
        ReaderCls, WriterCls = CoreEngine._route(in_ext, out_ext)

        try:
            model = ReaderCls(markdown).parse(payload, read_options or {})
            return WriterCls(markdown).render(model, write_options or {})
        except BlockConverterError:
            raise
        except Exception as e:
            raise ConversionFailedError(f"Conversion failed: {e}") from e

    @staticmethod
    def encode_to_blocks(html: str, options: Optional[Dict[str, Any]] = None,
                         markdown: Optional[MarkdownConverter] = None) -> str:
        """Editor HTML to the stored ``{"data": [...]}`` JSON."""
        return CoreEngine.convert_text(html, ".html", ".json", options, options, markdown)

    @staticmethod
    def decode_to_html(value: Optional[str], options: Optional[Dict[str, Any]] = None,
                       markdown: Optional[MarkdownConverter] = None) -> Optional[str]:
        """
        Stored block document JSON to display HTML.
        An empty value is returned as-is without being parsed.
        """
        if not value or not value.strip():
            return value
        return CoreEngine.convert_text(value, ".json", ".html", options, options, markdown)
