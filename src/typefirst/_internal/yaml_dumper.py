"""PyYAML dumper that writes reduced records with "type" first."""

import yaml

# Line breaks the YAML reader folds to a space or newline unless escaped
_BREAK_CHARS = ("\x85", "\u2028", "\u2029")


class SanitisedDumper(yaml.SafeDumper):
    """SafeDumper that knows how to represent Sanitised records.

    Plain mappings keep PyYAML's default sorted key order. A Sanitised
    record is represented from an explicit list of pairs, which
    represent_mapping does not re-sort. Strings holding Unicode line
    breaks are double-quoted so they load back unchanged.
    """


def represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if any(ch in data for ch in _BREAK_CHARS):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


def represent_sanitised(dumper: yaml.SafeDumper, data) -> yaml.MappingNode:
    return dumper.represent_mapping(
        "tag:yaml.org,2002:map",
        list(data.ordered_items()),
    )


SanitisedDumper.add_representer(str, represent_str)
