from __future__ import annotations

from typing import Optional

import requests

from ..core.exceptions import RemoteSyncError
from ..documents.model import Document
from ..documents.normalizer import ensure_document_shape
from .model import PushAck


class HttpRemoteDocumentService:
    """Remote document service reached with plain GET/POST on one endpoint."""

    def __init__(self, endpoint: str, *, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self._endpoint = endpoint
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _json(self, response: requests.Response, action: str):
        if response.status_code != 200:
            raise RemoteSyncError(f"Remote {action} failed with HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise RemoteSyncError(f"Remote {action} returned invalid JSON") from e

    def fetch(self) -> Document:
        try:
            response = self._session.get(self._endpoint, timeout=self._timeout)
        except requests.RequestException as e:
            raise RemoteSyncError(f"Remote load failed: {e}") from e
        body = self._json(response, "load")
        try:
            return ensure_document_shape(body)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise RemoteSyncError(f"Remote load returned an unusable document: {e}") from e

    def push(self, document: Document) -> PushAck:
        try:
            response = self._session.post(
                self._endpoint,
                json=document.to_dict(),
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise RemoteSyncError(f"Remote save failed: {e}") from e

        body = self._json(response, "save")
        if not isinstance(body, dict) or body.get("ok") is not True:
            raise RemoteSyncError("Remote save was not acknowledged")

        updated_at = body.get("updatedAt")
        return PushAck(ok=True, updated_at=str(updated_at) if updated_at else None)
