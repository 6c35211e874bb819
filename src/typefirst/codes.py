"""Error code constants for typefirst.

These constants prevent stringly-typed error codes and ensure
client code matches on the correct failure kinds.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Sanitisation and rendering error codes."""

    # The generify pass or a value encode failed
    ENCODING_ERROR = "ENCODING_ERROR"

    # Config has no "type" field, or it is not a string
    MISSING_OR_INVALID_TYPE = "MISSING_OR_INVALID_TYPE"
