from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Type

from blockdoc.core.errors import DecodeError, ValidationError


def _require_str(data: Dict[str, Any], key: str, block_type: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValidationError(f"'{block_type}' block requires a string '{key}' field")
    return value


@dataclass
class Block(ABC):
    """Base block in a document."""
    type: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def from_data(cls, data: Dict[str, Any]) -> "Block":
        pass

    @abstractmethod
    def to_data(self) -> Dict[str, Any]:
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "data": self.to_data()}

@dataclass
class TextBlock(Block):
    type: ClassVar[str] = "text"
    text: str = ""

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "TextBlock":
        return cls(text=_require_str(data, "text", cls.type))

    def to_data(self) -> Dict[str, Any]:
        return {"text": self.text}

@dataclass
class HeadingBlock(TextBlock):
    # Markdown without the leading "## "
    type: ClassVar[str] = "heading"

@dataclass
class ListBlock(TextBlock):
    # Markdown list source, every line indented by one space
    type: ClassVar[str] = "list"

@dataclass
class VideoBlock(Block):
    type: ClassVar[str] = "video"
    source: str = ""
    remote_id: str = ""

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "VideoBlock":
        return cls(
            source=_require_str(data, "source", cls.type),
            remote_id=_require_str(data, "remote_id", cls.type),
        )

    def to_data(self) -> Dict[str, Any]:
        return {"source": self.source, "remote_id": self.remote_id}

@dataclass
class EmbedBlock(Block):
    type: ClassVar[str] = "embed"
    html: str = ""

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "EmbedBlock":
        return cls(html=_require_str(data, "html", cls.type))

    def to_data(self) -> Dict[str, Any]:
        return {"html": self.html}

@dataclass
class QuoteBlock(Block):
    type: ClassVar[str] = "quote"
    text: str = ""
    city: str = ""

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "QuoteBlock":
        city = data.get("city")
        if city is not None and not isinstance(city, str):
            raise ValidationError("'quote' block 'city' must be a string")
        return cls(text=_require_str(data, "text", cls.type), city=city or "")

    def to_data(self) -> Dict[str, Any]:
        data = {"text": self.text}
        if self.city:
            data["city"] = self.city
        return data

@dataclass
class UnknownBlock(Block):
    """Block of a type this converter does not know, kept verbatim."""
    type_name: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_data(cls, data: Dict[str, Any], type_name: Optional[str] = None) -> "UnknownBlock":
        return cls(type_name=type_name, data=dict(data))

    def to_data(self) -> Dict[str, Any]:
        return dict(self.data)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"data": self.to_data()}
        if self.type_name is not None:
            out["type"] = self.type_name
        return out


BLOCK_TYPES: Dict[str, Type[Block]] = {
    cls.type: cls
    for cls in (TextBlock, HeadingBlock, ListBlock, VideoBlock, EmbedBlock, QuoteBlock)
}

# Older editor builds stored embeds under the provider name.
TYPE_ALIASES: Dict[str, str] = {"embedly": "embed"}


def block_from_dict(obj: Any, strict_types: bool = False) -> Block:
    """Build a block from one entry of the stored ``data`` list."""
    if not isinstance(obj, dict):
        raise ValidationError(f"Block entry must be an object, got {type(obj).__name__}")

    type_name = obj.get("type")
    data = obj.get("data", {})
    if not isinstance(data, dict):
        raise ValidationError(f"Payload of block '{type_name}' must be an object")

    block_cls = BLOCK_TYPES.get(TYPE_ALIASES.get(type_name, type_name)) if isinstance(type_name, str) else None
    if block_cls is None:
        if strict_types:
            raise ValidationError(f"Unknown block type '{type_name}'")
        return UnknownBlock.from_data(data, type_name)
    return block_cls.from_data(data)


@dataclass
class BlockDocument:
    """Ordered blocks of one rich-content field value."""
    blocks: List[Block] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"data": [block.to_dict() for block in self.blocks]}

    @classmethod
    def from_dict(cls, obj: Any, strict_types: bool = False) -> "BlockDocument":
        if not isinstance(obj, dict) or not isinstance(obj.get("data"), list):
            raise DecodeError("Block document must be an object with a 'data' list")
        return cls(blocks=[block_from_dict(entry, strict_types) for entry in obj["data"]])
