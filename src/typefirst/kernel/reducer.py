"""Reduce a component config to its type and the payload for that type."""

import logging
from typing import Any

from .generic import generify
from .sanitised import PLUGIN_KEY, TYPE_KEY, Sanitised
from typefirst.errors import MissingOrInvalidType

logger = logging.getLogger(__name__)


def sanitize_component(conf: Any) -> Sanitised:
    """Sanitize a component config down to {type, <payload>}.

    The "type" field names the component variant, and the only other
    field kept is the one under that variant's namespace. Payload
    precedence:

    1. The entry keyed by the type name, if present (even if null).
    2. Otherwise the "plugin" entry, if present and not null.
    3. Otherwise no payload; the result holds only "type".

    Args:
        conf: Config value accepted by generify()

    Returns:
        Sanitised record with at most two keys

    Raises:
        EncodingError: If the config cannot be converted to a mapping
        MissingOrInvalidType: If "type" is absent or not a string
    """
    generic = generify(conf)

    if TYPE_KEY not in generic:
        logger.debug("Rejecting config with keys %s: no type field", sorted(generic))
        raise MissingOrInvalidType()

    type_val = generic[TYPE_KEY]
    if not isinstance(type_val, str):
        logger.debug("Rejecting config: type field is %s", type(type_val).__name__)
        raise MissingOrInvalidType(type_val)

    reduced = {TYPE_KEY: type_val}
    if type_val in generic:
        reduced[type_val] = generic[type_val]
        logger.debug("Sanitised %r with its own payload", type_val)
    elif generic.get(PLUGIN_KEY) is not None:
        reduced[PLUGIN_KEY] = generic[PLUGIN_KEY]
        logger.debug("Sanitised %r with plugin payload", type_val)
    else:
        logger.debug("Sanitised %r without payload", type_val)

    return Sanitised(reduced)
