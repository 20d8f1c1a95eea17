"""HTML reader plugin: turns editor-submitted HTML into a BlockDocument."""

import logging
import re
from typing import Any, Dict, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from blockdoc.core.models import BlockDocument, HeadingBlock, ListBlock, TextBlock
from blockdoc.plugins.registry import InputReader, PluginRegistry

logger = logging.getLogger(__name__)

_ATX_RE = re.compile(r"^#{1,6}[ \t]+")


def find_body_root(soup: BeautifulSoup) -> Union[BeautifulSoup, Tag]:
    """Return the node whose children are the fragment's top-level nodes.

    A full document yields its <body>; a document without one its <html>;
    a bare fragment is its own root.
    """
    return soup.find("body") or soup.find("html") or soup


class HtmlReader(InputReader):
    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        return [".html", ".htm"]

    def parse(self, payload: str, options: Dict[str, Any]) -> BlockDocument:
        log_dropped = options.get("log_dropped", True)

        root = find_body_root(BeautifulSoup(payload, "html.parser"))
        model = BlockDocument(metadata={"type": "html"})

        for node in root.children:
            if isinstance(node, PreformattedString):
                continue
            if isinstance(node, NavigableString):
                if log_dropped and node.strip():
                    logger.warning("Dropping bare text outside a block: %.40r", str(node).strip())
                continue

            if node.name == "p":
                model.blocks.append(TextBlock(text=self.markdown.to_markdown(str(node))))
            elif node.name == "h2":
                text = self.markdown.to_markdown(str(node))
                model.blocks.append(HeadingBlock(text=_ATX_RE.sub("", text, count=1)))
            elif node.name == "ul":
                text = self.markdown.to_markdown(str(node))
                model.blocks.append(ListBlock(text=" " + text.replace("\n", "\n ")))
            elif log_dropped:
                logger.warning("Dropping unsupported <%s> element", node.name)

        logger.debug("Parsed %d blocks from HTML", len(model.blocks))
        return model


PluginRegistry.register_reader(HtmlReader)
