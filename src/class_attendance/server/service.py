from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..common.datetime_utils import now_iso
from ..core.exceptions import ValidationError
from ..documents.model import Document
from ..documents.normalizer import ensure_document_shape
from ..storage.model import PushAck
from ..storage.repository import LocalCache

logger = logging.getLogger(__name__)


class DocumentServerService:
    """Server side of the remote document service: one shared document."""

    def __init__(self, storage: LocalCache):
        self._storage = storage

    def get_document(self) -> Document:
        return ensure_document_shape(self._storage.load())

    def save_document(self, payload: Any) -> PushAck:
        if not isinstance(payload, Mapping):
            raise ValidationError("Document body must be a JSON object")

        document = ensure_document_shape(payload)
        document.updated_at = now_iso()
        self._storage.save(document)
        logger.info("Stored shared document (updatedAt=%s)", document.updated_at)
        return PushAck(ok=True, updated_at=document.updated_at)
