import os

# Empty URL keeps the app in local mode (cache file only)
REMOTE_ENDPOINT_URL = os.getenv("REMOTE_ENDPOINT_URL", "")
REMOTE_TIMEOUT_SECONDS = float(os.getenv("REMOTE_TIMEOUT_SECONDS", "0")) or None
SYNC_DEBOUNCE_SECONDS = float(os.getenv("SYNC_DEBOUNCE_SECONDS", "0.8"))

LOCAL_CACHE_PATH = os.getenv("LOCAL_CACHE_PATH", "data/class_attendance_v3.json")
SERVER_DOCUMENT_PATH = os.getenv("SERVER_DOCUMENT_PATH", "data/server_document.json")
DOCUMENT_ROUTE = os.getenv("DOCUMENT_ROUTE", "/api/document")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
