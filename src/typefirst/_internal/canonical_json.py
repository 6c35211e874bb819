"""Centralized JSON value encoding.

Every value written by the type-first JSON renderer goes through
canonical_dumps, so nested payload objects are byte-stable regardless
of the key order the caller built them with.
"""

import json
from typing import Any

from typefirst.errors import EncodingError


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization of a single generic value.

    Rules:
    - UTF-8 output (no ASCII escaping)
    - Sorted keys in nested objects
    - Stable separators (",", ":")
    - NaN and Infinity rejected

    Args:
        obj: Generic value (None, bool, int, float, str, list, dict)

    Returns:
        Canonical JSON string

    Raises:
        EncodingError: If the value is not JSON-serializable
    """
    try:
        return json.dumps(
            obj,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(f"cannot encode value as JSON: {exc}") from exc


def dumps_key(key: str) -> str:
    """Encode an object key as a JSON string literal."""
    return json.dumps(key, ensure_ascii=False)
