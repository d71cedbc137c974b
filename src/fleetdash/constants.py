"""
Application-wide constants for FleetDash.

Backend routes, storage keys and the defaults used by the configuration
models live here so the client, the CLI and the tests agree on them.
"""

# Network defaults
DEFAULT_BASE_URL = "http://localhost:3000/api"
DEFAULT_TIMEOUT_MS = 10000
MIN_TIMEOUT_MS = 1
MAX_TIMEOUT_MS = 300000
MS_PER_SECOND = 1000

# Headers
JSON_CONTENT_TYPE = "application/json"

# Token storage
AUTH_TOKEN_KEY = "authToken"
DEFAULT_TOKEN_FILE_NAME = "storage.json"

# Session expiry handling
LANDING_ROUTE = "/"
LOGIN_ROUTE_MARKER = "/login"
SESSION_REDIRECT_DELAY_SECONDS = 2.0

# Logging
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# Report kinds served under /reports/<kind>
REPORT_KINDS = ("inventory", "sales", "maintenance", "profit")
