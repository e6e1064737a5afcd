"""Canonical logging field names for API response diagnostics.

Keeping names centralized keeps the structured log shape stable between the
wrapper, the error collaborators and caller-side log filters.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"
EVENT = "event"

# Response fields.
STATUS_CODE = "status_code"
REASON_PHRASE = "reason_phrase"
METHOD = "method"
URL = "url"

# Response lifecycle events.
RESPONSE_DISPOSED_EVENT = "api_response_disposed"
RESPONSE_FAILURE_EVENT = "api_response_failure"
ERROR_CONTENT_UNAVAILABLE_EVENT = "api_error_content_unavailable"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
