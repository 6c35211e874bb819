"""typefirst: reduce component configs to {type, payload} and render them type-first."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("typefirst")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from typefirst.api import (
    Sanitised,
    SanitiseResult,
    check_component,
    sanitize_component,
    to_json,
    to_yaml,
)
from typefirst.codes import ErrorCode
from typefirst.errors import EncodingError, MissingOrInvalidType, SanitiseError
from typefirst.kernel.sanitised import SanitisedJSONEncoder
from typefirst._internal.yaml_dumper import SanitisedDumper

__all__ = [
    "__version__",
    "sanitize_component",
    "check_component",
    "to_json",
    "to_yaml",
    "Sanitised",
    "SanitiseResult",
    "SanitisedJSONEncoder",
    "SanitisedDumper",
    "ErrorCode",
    "SanitiseError",
    "EncodingError",
    "MissingOrInvalidType",
]
