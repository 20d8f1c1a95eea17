"""HTML writer plugin: renders a BlockDocument for display."""

import html
import logging
from typing import Any, Dict, List

from blockdoc.core.models import (
    Block,
    BlockDocument,
    EmbedBlock,
    HeadingBlock,
    QuoteBlock,
    UnknownBlock,
    VideoBlock,
)
from blockdoc.plugins.registry import OutputWriter, PluginRegistry

logger = logging.getLogger(__name__)

YOUTUBE_EMBED = (
    '<iframe class="youtube" src="//www.youtube.com/embed/{remote_id}" '
    'frameborder="0" allowfullscreen></iframe>'
)


class HtmlWriter(OutputWriter):
    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        return [".html", ".htm"]

    def render(self, model: BlockDocument, options: Dict[str, Any]) -> str:
        parts: List[str] = [self.render_block(block) for block in model.blocks]
        return "".join(parts)

    def render_block(self, block: Block) -> str:
        if isinstance(block, HeadingBlock):
            return self.markdown.to_html("## " + block.text)

        if isinstance(block, VideoBlock):
            if block.source == "youtube":
                return YOUTUBE_EMBED.format(remote_id=html.escape(block.remote_id, quote=True))
            logger.warning("Dropping video from unsupported source '%s'", block.source)
            return ""

        if isinstance(block, EmbedBlock):
            return block.html

        if isinstance(block, QuoteBlock):
            out = "<blockquote>" + self.markdown.to_html(block.text)
            if block.city:
                out += "<cite>" + html.escape(block.city) + "</cite>"
            return out + "</blockquote>"

        if isinstance(block, UnknownBlock):
            text = block.data.get("text")
            if not isinstance(text, str):
                logger.warning("Dropping '%s' block without text", block.type_name)
                return ""
            return self.markdown.to_html(text)

        # text, list
        return self.markdown.to_html(block.text)


PluginRegistry.register_writer(HtmlWriter)
