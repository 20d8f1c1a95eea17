import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".blockdoc.json"


@dataclass
class ConverterConfig:
    strict_types: bool = False
    log_dropped: bool = True
    indent: Optional[int] = None
    ensure_ascii: bool = True
    utf8_bom: bool = False
    log_level: str = "WARNING"

    def read_options(self) -> Dict[str, Any]:
        return {
            "strict_types": self.strict_types,
            "log_dropped": self.log_dropped,
        }

    def write_options(self) -> Dict[str, Any]:
        return {
            "indent": self.indent,
            "ensure_ascii": self.ensure_ascii,
            "utf8_bom": self.utf8_bom,
        }

    def save(self, path: Optional[Path] = None) -> None:
        target = path or CONFIG_PATH
        target.write_text(json.dumps(self.__dict__, ensure_ascii=False, indent=2), encoding="utf-8")

    @staticmethod
    def load(path: Optional[Path] = None) -> "ConverterConfig":
        source = path or CONFIG_PATH
        if not source.exists():
            return ConverterConfig()
        try:
            data = json.loads(source.read_text(encoding="utf-8"))
            defaults = ConverterConfig()
            log_level = str(data.get("log_level", defaults.log_level)).upper()
            if not isinstance(logging.getLevelName(log_level), int):
                logger.warning("Ignoring unknown log level %r in config %s", log_level, source)
                log_level = defaults.log_level
            return ConverterConfig(
                strict_types=bool(data.get("strict_types", defaults.strict_types)),
                log_dropped=bool(data.get("log_dropped", defaults.log_dropped)),
                indent=data.get("indent", defaults.indent),
                ensure_ascii=bool(data.get("ensure_ascii", defaults.ensure_ascii)),
                utf8_bom=bool(data.get("utf8_bom", defaults.utf8_bom)),
                log_level=log_level,
            )
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", source, e)
            return ConverterConfig()
