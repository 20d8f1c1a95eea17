import json

import pytest
from bs4 import BeautifulSoup

from blockdoc import decode_to_html, encode_to_blocks
from blockdoc.core.engine import CoreEngine
from blockdoc.core.errors import ConversionFailedError, DecodeError, UnsupportedExtensionError, ValidationError
from blockdoc.core.markdown import MarkdownConverter
from blockdoc.plugins.registry import PluginRegistry


class BrokenMarkdown(MarkdownConverter):
    def to_html(self, markdown):
        raise RuntimeError("boom")

    def to_markdown(self, html):
        raise RuntimeError("boom")


def top_level(html):
    soup = BeautifulSoup(html, "html.parser")
    return [(tag.name, tag.get_text(" ", strip=True)) for tag in soup.find_all(recursive=False)]


def test_plugin_registry():
    assert PluginRegistry.available_inputs() == [".htm", ".html", ".json"]
    assert PluginRegistry.available_outputs() == [".htm", ".html", ".json"]
    assert PluginRegistry.get_reader(".HTML") is not None
    assert PluginRegistry.get_reader(".invalid") is None


def test_engine_unsupported_extensions():
    with pytest.raises(UnsupportedExtensionError):
        CoreEngine.convert("in.invalid", "out.json", {}, {})

    with pytest.raises(UnsupportedExtensionError):
        CoreEngine.convert("in.html", "out.invalid", {}, {})

    with pytest.raises(UnsupportedExtensionError):
        CoreEngine.convert_text("x", ".docx", ".json")


def test_encode_preserves_order():
    data = json.loads(encode_to_blocks("<h2>A</h2><p>B</p><ul><li>C</li></ul>"))["data"]
    assert [b["type"] for b in data] == ["heading", "text", "list"]
    assert [b["data"]["text"] for b in data] == ["A", "B", " - C"]


def test_encode_empty_fragment():
    assert encode_to_blocks("") == '{"data":[]}'


def test_round_trip_supported_tags():
    html = (
        "<p>Intro with <em>emphasis</em></p>"
        "<h2>Section</h2>"
        "<ul><li>One</li><li>Two <strong>bold</strong></li></ul>"
        "<p>Outro</p>"
    )
    assert top_level(decode_to_html(encode_to_blocks(html))) == top_level(html)


def test_round_trip_is_stable():
    html = "<p>A <strong>b</strong></p><h2>C</h2><ul><li>d</li><li>e</li></ul>"
    stored = encode_to_blocks(html)
    assert encode_to_blocks(decode_to_html(stored)) == stored


def test_round_trip_keeps_markup_characters_as_text():
    html = "<p>Use &lt;script&gt;alert(1)&lt;/script&gt; carefully</p><p>[x](http://evil) &amp; more</p>"
    out = decode_to_html(encode_to_blocks(html))

    assert "<script>" not in out
    assert "<a " not in out
    assert top_level(out) == top_level(html)


@pytest.mark.parametrize("value", ["", None, "   "])
def test_decode_empty_passes_through(value):
    assert decode_to_html(value) == value


def test_decode_youtube(sample_document):
    out = decode_to_html(json.dumps(sample_document))
    assert 'src="//www.youtube.com/embed/abc123"' in out
    assert "<cite>NYC</cite></blockquote>" in out


def test_decode_errors_are_not_wrapped():
    with pytest.raises(DecodeError):
        decode_to_html("not json")

    with pytest.raises(ValidationError):
        decode_to_html('{"data":[{"type":"video","data":{"source":"youtube"}}]}')


def test_unexpected_failures_are_wrapped():
    with pytest.raises(ConversionFailedError, match="boom"):
        CoreEngine.encode_to_blocks("<p>x</p>", markdown=BrokenMarkdown())


def test_options_are_forwarded():
    with pytest.raises(ValidationError):
        decode_to_html('{"data":[{"type":"tweet","data":{}}]}', {"strict_types": True})


def test_convert_files(sample_html, tmp_path):
    json_path = tmp_path / "out" / "doc.json"
    html_path = tmp_path / "out" / "doc.html"

    CoreEngine.convert(sample_html, str(json_path), {}, {})
    data = json.loads(json_path.read_text(encoding="utf-8"))["data"]
    assert [b["type"] for b in data] == ["text", "heading", "list"]

    CoreEngine.convert(str(json_path), str(html_path), {}, {})
    assert [name for name, _ in top_level(html_path.read_text(encoding="utf-8"))] == ["p", "h2", "ul"]
