import json
import os
import subprocess
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def run_cli(*args, stdin=None):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    cmd = [sys.executable, "-m", "blockdoc.cli", *args]
    return subprocess.run(cmd, input=stdin, capture_output=True, text=True, env=env)


def test_cli_convert_html_to_json(sample_html, tmp_path):
    out_dir = tmp_path / "out"

    result = run_cli("convert", sample_html, "--out-type", "json", "--output-dir", str(out_dir))
    assert result.returncode == 0
    assert "Successfully converted" in result.stdout

    expected_out = out_dir / (Path(sample_html).stem + ".json")
    assert expected_out.exists()

    data = json.loads(expected_out.read_text(encoding="utf-8"))["data"]
    assert [b["type"] for b in data] == ["text", "heading", "list"]


def test_cli_convert_json_to_html(sample_json, tmp_path):
    result = run_cli("convert", sample_json, "--out-type", "html", "--output-dir", str(tmp_path / "html"))
    assert result.returncode == 0

    content = (tmp_path / "html" / "stored.html").read_text(encoding="utf-8")
    assert "<h2>Title</h2>" in content
    assert "//www.youtube.com/embed/abc123" in content


def test_cli_convert_reports_failures(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{broken", encoding="utf-8")

    result = run_cli("convert", str(bad), "--out-type", "html")
    assert result.returncode == 1
    assert "Failed to convert bad.json" in result.stderr
    assert not (tmp_path / "bad.html").exists()


def test_cli_encode_from_stdin():
    result = run_cli("encode", "-", stdin="<p>Keep</p><div>Drop</div><h2>Also Keep</h2>")
    assert result.returncode == 0
    data = json.loads(result.stdout)["data"]
    assert data == [
        {"type": "text", "data": {"text": "Keep"}},
        {"type": "heading", "data": {"text": "Also Keep"}},
    ]
    assert "Dropping unsupported <div> element" in result.stderr


def test_cli_decode_file(sample_json):
    result = run_cli("decode", sample_json)
    assert result.returncode == 0
    assert "<blockquote>" in result.stdout


def test_cli_strict_types(tmp_path):
    doc = tmp_path / "doc.json"
    doc.write_text('{"data":[{"type":"tweet","data":{"text":"x"}}]}', encoding="utf-8")

    assert run_cli("decode", str(doc)).returncode == 0
    result = run_cli("--strict-types", "decode", str(doc))
    assert result.returncode == 1
    assert "Unknown block type" in result.stderr
