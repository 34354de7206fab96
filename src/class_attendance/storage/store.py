"""In-memory document owner with local caching and remote synchronisation.

The store is the only writer of the active document. Every commit writes the
local cache straight away and, when a remote service is configured, schedules
a debounced push of the full document. Documents are replaced, never edited
in place, so a push in flight always sends a stable snapshot.
"""
from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_iso, parse_timestamp
from ..core.constants import DEFAULT_SYNC_DEBOUNCE_SECONDS
from ..core.enums import SyncMode, SyncStatus
from ..core.exceptions import RemoteSyncError, ValidationError
from ..documents.model import Document
from ..documents.normalizer import default_document, ensure_document_shape
from ..documents.serialization import export_document, import_document
from .model import SyncState
from .repository import LocalCache, RemoteDocumentService

logger = logging.getLogger(__name__)

# (interval_seconds, callback) -> object with start() and cancel()
TimerFactory = Callable[[float, Callable[[], None]], Any]


class AttendanceStore:
    def __init__(
        self,
        local_cache: LocalCache,
        remote: Optional[RemoteDocumentService] = None,
        *,
        debounce_seconds: float = DEFAULT_SYNC_DEBOUNCE_SECONDS,
        timer_factory: TimerFactory = threading.Timer,
    ):
        self._cache = local_cache
        self._remote = remote
        self._debounce_seconds = float(debounce_seconds)
        self._timer_factory = timer_factory

        self._lock = threading.Lock()
        self._document = default_document()
        self._pending_timer: Any = None
        self._timer_generation = 0
        self._in_flight = 0
        self._closed = False

        self._mode = SyncMode.REMOTE if remote else SyncMode.LOCAL
        self._status = SyncStatus.IDLE if remote else SyncStatus.LOCAL
        self._last_pushed_at: Optional[str] = None
        self._remote_updated_at: Optional[str] = None

    @property
    def document(self) -> Document:
        """A snapshot of the active document; editing it does not touch the store."""
        return copy.deepcopy(self._document)

    @property
    def sync_state(self) -> SyncState:
        with self._lock:
            return SyncState(
                mode=self._mode,
                status=self._status,
                last_pushed_at=self._last_pushed_at,
                remote_updated_at=self._remote_updated_at,
            )

    @property
    def has_pending_push(self) -> bool:
        with self._lock:
            return self._pending_timer is not None

    @property
    def pushes_in_flight(self) -> int:
        with self._lock:
            return self._in_flight

    def _set_status(self, status: SyncStatus) -> None:
        with self._lock:
            self._status = status

    # ---------------------------------------------------------------- startup

    def start(self) -> Document:
        """Load the cached document, then reconcile with the remote if there is one."""
        self._document = self._load_local()
        if self._remote:
            self.reconcile()
        return self.document

    def reconcile(self) -> Document:
        """Pick whichever of the remote and local documents was updated last."""
        if not self._remote:
            return self.document

        self._set_status(SyncStatus.SYNCING)
        try:
            remote_doc = ensure_document_shape(self._remote.fetch())
        except (RemoteSyncError, TypeError, ValueError, ArithmeticError) as e:
            logger.warning("Remote load failed, continuing with local state: %s", e)
            self._set_status(SyncStatus.IDLE)
            return self.document

        local_doc = self._load_local()
        remote_ts = parse_timestamp(remote_doc.updated_at)
        local_ts = parse_timestamp(local_doc.updated_at)
        if remote_ts > local_ts:
            self._document = remote_doc
            self._cache.save(remote_doc)
        else:
            self._document = local_doc
            self._cache.save(local_doc)
            if local_ts > remote_ts:
                # remote is behind, send it our copy
                self._schedule_push()

        with self._lock:
            self._remote_updated_at = remote_doc.updated_at
        self._set_status(SyncStatus.SYNCED)
        return self.document

    def _load_local(self) -> Document:
        try:
            return ensure_document_shape(self._cache.load())
        except (TypeError, ValueError, ArithmeticError) as e:
            logger.warning("Cached document is unusable, starting from defaults: %s", e)
            return default_document()

    # -------------------------------------------------------------- mutations

    def apply(self, operation: Callable[..., Document], *args, **kwargs) -> Document:
        """Run a mutation against the current document and commit its result."""
        updated = operation(self._document, *args, **kwargs)
        self._commit(updated)
        return self.document

    def replace(self, document: Any) -> Document:
        updated = ensure_document_shape(document)
        self._commit(updated)
        return self.document

    def reset(self) -> Document:
        updated = default_document()
        self._commit(updated)
        return self.document

    def export_json(self) -> bytes:
        return export_document(self._document)

    def import_json(self, data: bytes | str) -> bool:
        try:
            document = import_document(data)
        except ValidationError as e:
            logger.warning("Rejected document import: %s", e)
            return False
        self._commit(document)
        return True

    def _commit(self, document: Document) -> None:
        self._document = document
        self._cache.save(document)
        self._schedule_push()

    # ------------------------------------------------------------------- push

    def _schedule_push(self) -> None:
        if not self._remote:
            return

        with self._lock:
            if self._closed:
                return
            if self._pending_timer is not None:
                self._pending_timer.cancel()
            self._timer_generation += 1
            generation = self._timer_generation
            timer = self._timer_factory(self._debounce_seconds, lambda: self._on_timer(generation))
            timer.daemon = True
            self._pending_timer = timer
        timer.start()

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._timer_generation:
                return
            self._pending_timer = None
        self._push()

    def flush(self) -> bool:
        """Push right away if a push is waiting on its timer."""
        with self._lock:
            if self._pending_timer is None:
                return False
            self._pending_timer.cancel()
            self._pending_timer = None
            self._timer_generation += 1
        self._push()
        return True

    def _push(self) -> None:
        with self._lock:
            if self._closed or not self._remote:
                return
            document = self._document
            self._status = SyncStatus.SYNCING
            self._in_flight += 1

        try:
            ack = self._remote.push(document)
        except RemoteSyncError as e:
            logger.warning("Remote save failed: %s", e)
            with self._lock:
                self._in_flight -= 1
                if not self._closed:
                    self._status = SyncStatus.IDLE
            return

        with self._lock:
            self._in_flight -= 1
            if self._closed:
                return
            self._last_pushed_at = now_iso()
            self._remote_updated_at = ack.updated_at
            self._status = SyncStatus.SYNCED

    def close(self) -> None:
        """Cancel any waiting push; results of pushes already sent are ignored."""
        with self._lock:
            self._closed = True
            if self._pending_timer is not None:
                self._pending_timer.cancel()
                self._pending_timer = None
            self._timer_generation += 1
