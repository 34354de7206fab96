from __future__ import annotations

import json

from ..core.exceptions import ValidationError
from .model import Document
from .normalizer import ensure_document_shape


def export_document(document: Document) -> bytes:
    """Serialize the document to UTF-8 JSON bytes."""
    return json.dumps(document.to_dict(), ensure_ascii=False).encode("utf-8")


def import_document(data: bytes | str) -> Document:
    """Parse exported JSON and normalize it into a document.

    Raises ValidationError when the payload is not valid JSON or cannot be
    turned into a document.
    """
    try:
        raw = json.loads(data)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid document file: {e}") from e
    try:
        return ensure_document_shape(raw)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise ValidationError(f"Unusable document file: {e}") from e
