import json

import pytest

from blockdoc.core.markdown import MarkdownConverter


SAMPLE_HTML = (
    "<p>Hello <strong>World</strong></p>\n"
    "<div>Sidebar</div>\n"
    "<h2>Chapter one</h2>\n"
    "<ul><li>One</li><li>Two</li></ul>\n"
)

SAMPLE_DOCUMENT = {
    "data": [
        {"type": "heading", "data": {"text": "Title"}},
        {"type": "text", "data": {"text": "Some *text*"}},
        {"type": "video", "data": {"source": "youtube", "remote_id": "abc123"}},
        {"type": "quote", "data": {"text": "Hello", "city": "NYC"}},
        {"type": "embed", "data": {"html": "<div class=\"embed\">x</div>"}},
    ]
}


class FakeMarkdown(MarkdownConverter):
    """Marks every transform so tests can see what was passed through."""

    def to_html(self, markdown):
        return f"<md>{markdown}</md>"

    def to_markdown(self, html):
        return f"md({html})"


@pytest.fixture
def fake_markdown():
    return FakeMarkdown()


@pytest.fixture
def sample_html(tmp_path):
    path = tmp_path / "sample.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return str(path)


@pytest.fixture
def sample_json(tmp_path):
    path = tmp_path / "stored.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")
    return str(path)


@pytest.fixture
def sample_document():
    return json.loads(json.dumps(SAMPLE_DOCUMENT))
