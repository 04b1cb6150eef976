import logging
from pathlib import Path

import yaml

from .builtin import BUILTIN_FORMATS
from .format import DocumentFormat

logger = logging.getLogger(__name__)


class FormatsLibrary:
    def __init__(self, directory: str | None = None, include_builtin: bool = True) -> None:
        self._formats: dict[str, DocumentFormat] = {}
        if include_builtin:
            for fmt in BUILTIN_FORMATS:
                self.register(fmt)
        if directory is not None:
            logger.info("Loading document formats from directory: %s", directory)
            self._load_all(Path(directory))
        logger.info("Loaded %d document formats", len(self._formats))

    def register(self, fmt: DocumentFormat) -> None:
        if fmt.name in self._formats:
            raise ValueError(f"Format '{fmt.name}' already registered")

        self._formats[fmt.name] = fmt
        logger.debug("Registered format: %s", fmt.name)

    def get(self, name: str) -> DocumentFormat:
        try:
            return self._formats[name]
        except KeyError:
            logger.error("Format not found: %s", name)
            raise KeyError(f"Format '{name}' not found")

    def list(self) -> list[str]:
        return sorted(self._formats)

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            self.register(self._load_format(file_path))
            logger.debug("Loaded format from %s", file_path)

    def _load_format(self, file_path: Path) -> DocumentFormat:
        with open(file_path) as f:
            data = yaml.safe_load(f)
        return DocumentFormat(**data)
