"""Reduced component records and their type-first renderers.

A Sanitised record holds a "type" discriminant plus at most one payload
entry. Both renderers emit "type" ahead of every other key:

- YAML: "type" first, remaining keys in PyYAML's default (sorted) order.
- JSON: assembled by hand as {"type":<V>,"k1":<V1>,...} with the
  remaining keys sorted by code point.
"""

import copy
import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Tuple

import yaml

from typefirst._internal.canonical_json import canonical_dumps, dumps_key
from typefirst._internal.yaml_dumper import SanitisedDumper, represent_sanitised
from typefirst.errors import EncodingError

logger = logging.getLogger(__name__)

TYPE_KEY = "type"
PLUGIN_KEY = "plugin"


class Sanitised(Mapping):
    """Read-only reduced record that renders with "type" first.

    Values are deep-copied on construction and on every read, so nested
    payloads cannot be changed after the record is built.

    Records built by sanitize_component always carry a string "type".
    Direct construction also accepts a missing or null "type"; the JSON
    renderer then omits the pair and the YAML renderer writes
    `type: null`.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping = (), **kwargs: Any):
        merged = dict(data, **kwargs)
        for key in merged:
            if not isinstance(key, str):
                raise EncodingError(
                    f"record keys must be strings, got {type(key).__name__}"
                )
        try:
            self._data = MappingProxyType(copy.deepcopy(merged))
        except RecursionError as exc:
            raise EncodingError("record value is nested too deeply") from exc

    def __getitem__(self, key: str) -> Any:
        return copy.deepcopy(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Sanitised({dict(self._data)!r})"

    @property
    def type(self) -> Any:
        return copy.deepcopy(self._data.get(TYPE_KEY))

    def other_keys(self) -> List[str]:
        """Non-type keys in code point order."""
        return sorted(k for k in self._data if k != TYPE_KEY)

    def ordered_items(self) -> Iterator[Tuple[str, Any]]:
        """Yield ("type", value) first, then the remaining sorted pairs."""
        yield TYPE_KEY, self.type
        for key in self.other_keys():
            yield key, self[key]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict copy whose insertion order puts "type" first."""
        return dict(self.ordered_items())

    def to_yaml(self) -> str:
        """Render as a YAML block mapping with "type" as the first field.

        Raises:
            EncodingError: If a value cannot be represented in YAML
        """
        try:
            return yaml.dump(
                self,
                Dumper=SanitisedDumper,
                default_flow_style=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as exc:
            logger.debug("YAML render failed for type=%r: %s", self.type, exc)
            raise EncodingError(f"cannot encode record as YAML: {exc}") from exc
        except RecursionError as exc:
            raise EncodingError("record value is nested too deeply for YAML") from exc

    def to_json(self) -> str:
        """Render as compact JSON with "type" as the first key.

        Output matches {"type":<V>,"k1":<V1>,...}: others sorted, no
        whitespace beyond what value encoding inserts, and {} for an
        empty record. The type pair is skipped when its value is null.

        Raises:
            EncodingError: If any value cannot be encoded; nothing is
                returned in that case
        """
        parts: List[str] = []

        type_val = self.type
        if type_val is not None:
            parts.append(f'"{TYPE_KEY}":' + canonical_dumps(type_val))

        for key in self.other_keys():
            parts.append(dumps_key(key) + ":" + canonical_dumps(self._data[key]))

        return "{" + ",".join(parts) + "}"


SanitisedDumper.add_representer(Sanitised, represent_sanitised)


class SanitisedJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes nested Sanitised records type-first.

    Use with json.dumps(doc, cls=SanitisedJSONEncoder) when a reduced
    record is embedded in a larger document. Do not combine with
    sort_keys=True, which would re-sort the record's keys.
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, Sanitised):
            return {k: v for k, v in o.ordered_items() if k != TYPE_KEY or v is not None}
        return super().default(o)
