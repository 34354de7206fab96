import os

REMOTE_ENDPOINT_URL = ""
REMOTE_TIMEOUT_SECONDS = None
SYNC_DEBOUNCE_SECONDS = 0.0

LOCAL_CACHE_PATH = os.getenv("LOCAL_CACHE_PATH", "data/test_cache.json")
SERVER_DOCUMENT_PATH = os.getenv("SERVER_DOCUMENT_PATH", "data/test_server_document.json")
DOCUMENT_ROUTE = "/api/document"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
