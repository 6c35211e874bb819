"""Generify: convert an arbitrary config value into a schema-less mapping.

The conversion runs in two passes:

1. A structural walk that turns models, dataclasses, enums, dates and
   containers into plain generic values (None, bool, int, float, str,
   list, dict). Unsupported types and cyclic references fail here with
   the dotted path of the offending value.
2. A YAML round trip through a PyYAML safe dumper and loader, which
   yields the same generic shape a config file with this content would
   load as.

The caller's value is never mutated.
"""

import dataclasses
import datetime
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Union

import yaml
from pydantic import BaseModel

from typefirst._internal.yaml_dumper import SanitisedDumper
from typefirst.errors import EncodingError

logger = logging.getLogger(__name__)

GenericValue = Union[None, bool, int, float, str, List["GenericValue"], Dict[str, "GenericValue"]]
GenericRecord = Dict[str, GenericValue]


def _child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _index_path(path: str, index: int) -> str:
    return f"{path}[{index}]" if path else f"[{index}]"


def _walk(obj: Any, path: str, active: set[int]) -> GenericValue:
    """Convert obj into a generic value.

    `active` holds the ids of containers on the current path; seeing one
    again means the structure refers back to itself.
    """
    # bool before int: bool is an int subclass
    if obj is None or isinstance(obj, bool):
        return obj
    if isinstance(obj, Enum):
        return _walk(obj.value, path, active)
    if isinstance(obj, int):
        return int(obj)
    if isinstance(obj, float):
        return float(obj)
    if isinstance(obj, str):
        return str(obj)
    # datetime before date: datetime is a date subclass
    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()

    if isinstance(obj, BaseModel):
        return _walk(obj.model_dump(mode="json", by_alias=True), path, active)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
        return _walk_container(obj, fields, path, active)
    if isinstance(obj, (Mapping, list, tuple)):
        return _walk_container(obj, obj, path, active)

    raise EncodingError(f"unsupported config value type: {type(obj).__name__}", path)


def _walk_container(owner: Any, items: Any, path: str, active: set[int]) -> GenericValue:
    marker = id(owner)
    if marker in active:
        raise EncodingError("cyclic reference in config value", path)
    active.add(marker)
    try:
        if isinstance(items, Mapping):
            out: Dict[str, GenericValue] = {}
            for key, value in items.items():
                if isinstance(key, Enum) and isinstance(key.value, str):
                    key = key.value
                if not isinstance(key, str):
                    raise EncodingError(
                        f"mapping keys must be strings, got {type(key).__name__}", path
                    )
                out[str(key)] = _walk(value, _child_path(path, key), active)
            return out
        return [_walk(item, _index_path(path, i), active) for i, item in enumerate(items)]
    finally:
        active.discard(marker)


def generify(conf: Any) -> GenericRecord:
    """Convert a config value into a generic string-keyed mapping.

    Args:
        conf: Any supported config value (mapping, pydantic model,
            dataclass, ...). Its top level must be mapping-shaped.

    Returns:
        A fresh dict of generic values.

    Raises:
        EncodingError: If the value holds unsupported types or cycles,
            the YAML round trip fails, or the result is not a mapping.
    """
    try:
        walked = _walk(conf, "", set())
    except RecursionError as exc:
        raise EncodingError("config value is nested too deeply") from exc

    try:
        text = yaml.dump(
            walked,
            Dumper=SanitisedDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        logger.debug("YAML round trip failed: %s", exc)
        raise EncodingError(f"YAML round trip failed: {exc}") from exc
    except RecursionError as exc:
        raise EncodingError("config value is nested too deeply for YAML") from exc

    if not isinstance(loaded, dict):
        raise EncodingError(
            f"config must encode to a mapping, got {type(loaded).__name__}"
        )
    return loaded
