import json
from typing import Any, Dict

from blockdoc.core.errors import DecodeError
from blockdoc.core.models import BlockDocument
from blockdoc.plugins.registry import InputReader, PluginRegistry


class BlockJsonReader(InputReader):
    """Read the stored ``{"data": [...]}`` envelope."""

    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        return [".json"]

    def parse(self, payload: str, options: Dict[str, Any]) -> BlockDocument:
        try:
            obj = json.loads(payload)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Invalid block document JSON: {e}") from e

        model = BlockDocument.from_dict(obj, strict_types=options.get("strict_types", False))
        model.metadata["type"] = "json"
        return model


PluginRegistry.register_reader(BlockJsonReader)
