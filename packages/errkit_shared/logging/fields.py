"""Canonical logging field names for errkit packages.

Adapters bind these keys through the logging context so converted errors
produce the same structured shape regardless of which adapter emitted them.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Structured error fields.
ERROR = "error"
MESSAGE_ID = "message_id"
STATUS = "status"
ERROR_VARIANT = "error_variant"
FAILURE = "failure"
DETAIL_KEYS = "detail_keys"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
