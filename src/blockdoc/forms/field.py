from typing import Any, Dict, Mapping, Optional

from blockdoc.core.engine import CoreEngine


class SirTrevorField:
    """Rich-content form field storing its value as a block document.

    The field receives HTML when it is filled and keeps the JSON form.
    Rendering happens only for a value edited in the current request;
    a stored value read cold is returned untouched for an external renderer.
    """

    def __init__(self, name: str, value: Optional[str] = None, options: Optional[Dict[str, Any]] = None):
        self.name = name
        self.options = options or {}
        self.value: Optional[str] = None
        if value is not None:
            self.set_value(value)

    def set_value(self, html: str) -> None:
        self.value = CoreEngine.encode_to_blocks(html, self.options)

    def get_html(self, submitted: Optional[Mapping[str, str]] = None) -> Optional[str]:
        if submitted is not None and self.name in submitted:
            return CoreEngine.decode_to_html(submitted[self.name] or "", self.options)
        return self.value
