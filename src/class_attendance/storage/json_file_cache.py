from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..documents.model import Document

logger = logging.getLogger(__name__)


class JsonFileCache:
    """Local cache kept as one UTF-8 JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[Any]:
        if not self._path.exists():
            return None
        try:
            with self._path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Could not load cached document from %s: %s", self._path, e)
            return None

    def save(self, document: Document) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(document.to_dict(), f, ensure_ascii=False, indent=2)
            tmp_path.replace(self._path)
        except OSError as e:
            logger.error("Could not save document to %s: %s", self._path, e)
