from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Type

from blockdoc.core.markdown import DefaultMarkdownConverter, MarkdownConverter
from blockdoc.core.models import BlockDocument


class InputReader(ABC):
    def __init__(self, markdown: Optional[MarkdownConverter] = None):
        self.markdown = markdown or DefaultMarkdownConverter()

    @classmethod
    @abstractmethod
    def get_supported_extensions(cls) -> list[str]:
        """e.g., ['.html']"""
        pass

    @abstractmethod
    def parse(self, payload: str, options: Dict[str, Any]) -> BlockDocument:
        pass

    def read(self, file_path: str, options: Dict[str, Any]) -> BlockDocument:
        model = self.parse(Path(file_path).read_text(encoding="utf-8-sig"), options)
        model.metadata.setdefault("source", file_path)
        return model


class OutputWriter(ABC):
    def __init__(self, markdown: Optional[MarkdownConverter] = None):
        self.markdown = markdown or DefaultMarkdownConverter()

    @classmethod
    @abstractmethod
    def get_supported_extensions(cls) -> list[str]:
        """e.g., ['.json']"""
        pass

    @abstractmethod
    def render(self, model: BlockDocument, options: Dict[str, Any]) -> str:
        pass

    def write(self, model: BlockDocument, output_path: str, options: Dict[str, Any]) -> None:
        encoding = "utf-8-sig" if options.get("utf8_bom", False) else "utf-8"
        out_p = Path(output_path)
        out_p.parent.mkdir(parents=True, exist_ok=True)
        out_p.write_text(self.render(model, options), encoding=encoding, newline="\n")


class PluginRegistry:
    _readers: Dict[str, Type[InputReader]] = {}
    _writers: Dict[str, Type[OutputWriter]] = {}

    @classmethod
    def register_reader(cls, reader_cls: Type[InputReader]) -> None:
        for ext in reader_cls.get_supported_extensions():
            cls._readers[ext.lower()] = reader_cls

    @classmethod
    def register_writer(cls, writer_cls: Type[OutputWriter]) -> None:
        for ext in writer_cls.get_supported_extensions():
            cls._writers[ext.lower()] = writer_cls

    @classmethod
    def get_reader(cls, ext: str) -> Optional[Type[InputReader]]:
        return cls._readers.get(ext.lower())

    @classmethod
    def get_writer(cls, ext: str) -> Optional[Type[OutputWriter]]:
        return cls._writers.get(ext.lower())

    @classmethod
    def available_inputs(cls) -> list[str]:
        return sorted(cls._readers.keys())

    @classmethod
    def available_outputs(cls) -> list[str]:
        return sorted(cls._writers.keys())
