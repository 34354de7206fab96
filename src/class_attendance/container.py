from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_DOCUMENT_ROUTE,
    DEFAULT_LOCAL_CACHE_PATH,
    DEFAULT_SERVER_DOCUMENT_PATH,
    DEFAULT_SYNC_DEBOUNCE_SECONDS,
)
from .roster.service import RosterService
from .server.service import DocumentServerService
from .statistics.service import StatisticsService
from .storage.http_remote import HttpRemoteDocumentService
from .storage.json_file_cache import JsonFileCache
from .storage.store import AttendanceStore


@dataclass(frozen=True)
class Container:
    local_cache: JsonFileCache
    remote: Optional[HttpRemoteDocumentService]
    store: AttendanceStore

    roster_service: RosterService
    attendance_service: AttendanceService
    statistics_service: StatisticsService
    document_server: DocumentServerService

    document_route: str


def build_container(*, settings: Any) -> Container:
    """Wire services from a settings module (or any object with the same attributes)."""

    endpoint = str(getattr(settings, "REMOTE_ENDPOINT_URL", "") or "")
    timeout = getattr(settings, "REMOTE_TIMEOUT_SECONDS", None)

    local_cache = JsonFileCache(getattr(settings, "LOCAL_CACHE_PATH", DEFAULT_LOCAL_CACHE_PATH))
    remote = HttpRemoteDocumentService(endpoint, timeout=timeout) if endpoint else None
    store = AttendanceStore(
        local_cache,
        remote,
        debounce_seconds=float(getattr(settings, "SYNC_DEBOUNCE_SECONDS", DEFAULT_SYNC_DEBOUNCE_SECONDS)),
    )

    server_storage = JsonFileCache(getattr(settings, "SERVER_DOCUMENT_PATH", DEFAULT_SERVER_DOCUMENT_PATH))

    return Container(
        local_cache=local_cache,
        remote=remote,
        store=store,
        roster_service=RosterService(store),
        attendance_service=AttendanceService(store),
        statistics_service=StatisticsService(store),
        document_server=DocumentServerService(server_storage),
        document_route=str(getattr(settings, "DOCUMENT_ROUTE", DEFAULT_DOCUMENT_ROUTE)),
    )
