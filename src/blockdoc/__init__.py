import blockdoc.plugins  # noqa: F401 - registers readers and writers
from blockdoc.core.engine import CoreEngine
from blockdoc.core.errors import (
    BlockConverterError,
    ConversionFailedError,
    DecodeError,
    UnsupportedExtensionError,
    ValidationError,
)
from blockdoc.core.models import (
    Block,
    BlockDocument,
    EmbedBlock,
    HeadingBlock,
    ListBlock,
    QuoteBlock,
    TextBlock,
    UnknownBlock,
    VideoBlock,
)

encode_to_blocks = CoreEngine.encode_to_blocks
decode_to_html = CoreEngine.decode_to_html

__all__ = [
    "encode_to_blocks",
    "decode_to_html",
    "CoreEngine",
    "Block",
    "BlockDocument",
    "EmbedBlock",
    "HeadingBlock",
    "ListBlock",
    "QuoteBlock",
    "TextBlock",
    "UnknownBlock",
    "VideoBlock",
    "BlockConverterError",
    "ConversionFailedError",
    "DecodeError",
    "UnsupportedExtensionError",
    "ValidationError",
]
