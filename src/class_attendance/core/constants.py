"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DOCUMENT_VERSION = 1

DEFAULT_CLASSES = (
    {"id": "logos", "name": "Logos", "ageRange": "18–24 años"},
    {"id": "smart", "name": "Smart Class", "ageRange": "25–39 años"},
    {"id": "moriah", "name": "Moriah", "ageRange": "40–55 años"},
    {"id": "horeb", "name": "Horeb", "ageRange": "56–65 años"},
    {"id": "sabiduria", "name": "Sabiduría", "ageRange": "+66 años"},
)

DEFAULT_SYNC_DEBOUNCE_SECONDS = 0.8
DROPOUT_STREAK_THRESHOLD = 3
DEFAULT_RANKING_LIMIT = 5
PERSON_ID_LENGTH = 8

DEFAULT_LOCAL_CACHE_PATH = "data/class_attendance_v3.json"
DEFAULT_SERVER_DOCUMENT_PATH = "data/server_document.json"
DEFAULT_DOCUMENT_ROUTE = "/api/document"
BACKUP_FILE_PREFIX = "class_attendance_backup"
