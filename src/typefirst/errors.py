"""Exceptions raised by sanitisation and rendering."""

from typing import Any, Optional

from typefirst.codes import ErrorCode

_NOT_GIVEN: Any = object()


class SanitiseError(ValueError):
    """Base exception for sanitisation errors."""
    code: ErrorCode

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class EncodingError(SanitiseError):
    """Raised when a value cannot be generified or encoded."""
    code = ErrorCode.ENCODING_ERROR


class MissingOrInvalidType(SanitiseError):
    """Raised when a config has no string "type" field."""
    code = ErrorCode.MISSING_OR_INVALID_TYPE

    def __init__(self, found: Any = _NOT_GIVEN):
        # missing: no "type" key at all; otherwise found holds the bad value
        self.missing = found is _NOT_GIVEN
        self.found = None if self.missing else found
        if self.missing:
            msg = "attempted to sanitize config without a type field"
        else:
            msg = f"config type field must be a string, got {type(found).__name__}"
        super().__init__(msg)
