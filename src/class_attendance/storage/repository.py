from __future__ import annotations

from typing import Any, Optional, Protocol

from ..documents.model import Document
from .model import PushAck


class LocalCache(Protocol):
    """Synchronous cache next to the process. Never raises."""

    def load(self) -> Optional[Any]:
        """Return the raw stored value, or None when nothing usable is stored."""

        raise NotImplementedError

    def save(self, document: Document) -> None:
        raise NotImplementedError


class RemoteDocumentService(Protocol):
    """Shared copy of the whole document. Failures raise RemoteSyncError."""

    def fetch(self) -> Document:
        raise NotImplementedError

    def push(self, document: Document) -> PushAck:
        raise NotImplementedError
