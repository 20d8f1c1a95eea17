import json
from typing import Any, Dict

from blockdoc.core.models import BlockDocument
from blockdoc.plugins.registry import OutputWriter, PluginRegistry


class BlockJsonWriter(OutputWriter):
    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        return [".json"]

    def render(self, model: BlockDocument, options: Dict[str, Any]) -> str:
        indent = options.get("indent")
        ensure_ascii = options.get("ensure_ascii", True)
        separators = None if indent is not None else (",", ":")
        return json.dumps(model.to_dict(), indent=indent, ensure_ascii=ensure_ascii, separators=separators)


PluginRegistry.register_writer(BlockJsonWriter)
