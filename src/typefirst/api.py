"""Public API for typefirst.

High-level functions for sanitising component configs and rendering
them with the "type" field first. Callers should use these functions
instead of importing from typefirst.kernel or typefirst._internal.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from typefirst.codes import ErrorCode
from typefirst.errors import SanitiseError
from typefirst.kernel.reducer import sanitize_component
from typefirst.kernel.sanitised import Sanitised

logger = logging.getLogger(__name__)


class SanitiseResult(BaseModel):
    """Result of a non-raising sanitisation check."""
    ok: bool
    code: Optional[ErrorCode] = None  # Set when ok is False
    message: Optional[str] = None
    sanitised: Optional[Dict[str, Any]] = None  # Type-first dict when ok is True


def to_json(conf: Any) -> str:
    """Sanitize a component config and render it as type-first JSON."""
    return sanitize_component(conf).to_json()


def to_yaml(conf: Any) -> str:
    """Sanitize a component config and render it as type-first YAML."""
    return sanitize_component(conf).to_yaml()


def check_component(conf: Any) -> SanitiseResult:
    """Sanitize a component config, reporting failure instead of raising.

    Args:
        conf: Config value accepted by sanitize_component()

    Returns:
        SanitiseResult with ok=True and the reduced record, or ok=False
        with the error code and message
    """
    try:
        sanitised = sanitize_component(conf)
    except SanitiseError as exc:
        logger.debug("Component check failed: %s", exc)
        return SanitiseResult(ok=False, code=exc.code, message=str(exc))
    return SanitiseResult(ok=True, sanitised=sanitised.to_dict())


__all__ = [
    "Sanitised",
    "SanitiseResult",
    "check_component",
    "sanitize_component",
    "to_json",
    "to_yaml",
]
