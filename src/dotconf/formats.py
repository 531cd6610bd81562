"""Format tags: addressing shapes, source encodings and tag resolution."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import PurePath

from dotconf.errors import UnsupportedFormatError

__all__ = ["ConfigFormat", "SourceFormat", "resolve_format", "infer_format"]

logger = logging.getLogger(__name__)


class ConfigFormat(str, Enum):
    """How dotted keys are addressed against the decoded data."""

    FLAT = "flat"
    SECTIONED = "sectioned"
    NESTED = "nested"


class SourceFormat(str, Enum):
    """Wire encoding of a configuration file."""

    CONF = "conf"
    INI = "ini"
    JSON = "json"
    YAML = "yaml"

    @property
    def config_format(self) -> ConfigFormat:
        """The addressing shape this encoding decodes to."""
        return _SHAPES[self]


_SHAPES: dict[SourceFormat, ConfigFormat] = {
    SourceFormat.CONF: ConfigFormat.FLAT,
    SourceFormat.INI: ConfigFormat.SECTIONED,
    SourceFormat.JSON: ConfigFormat.NESTED,
    SourceFormat.YAML: ConfigFormat.NESTED,
}

_ALIASES: dict[str, SourceFormat] = {
    "conf": SourceFormat.CONF,
    "flat": SourceFormat.CONF,
    "ini": SourceFormat.INI,
    "sectioned": SourceFormat.INI,
    "json": SourceFormat.JSON,
    "nested-json": SourceFormat.JSON,
    "yaml": SourceFormat.YAML,
    "yml": SourceFormat.YAML,
    "nested-yaml": SourceFormat.YAML,
}

_SUFFIXES: dict[str, SourceFormat] = {
    ".conf": SourceFormat.CONF,
    ".cfg": SourceFormat.INI,
    ".ini": SourceFormat.INI,
    ".json": SourceFormat.JSON,
    ".yaml": SourceFormat.YAML,
    ".yml": SourceFormat.YAML,
}


def resolve_format(tag: str | SourceFormat) -> SourceFormat:
    """Resolve a format tag or alias to a SourceFormat.

    Tags are matched case-insensitively after stripping surrounding
    whitespace. Raises UnsupportedFormatError for anything else.
    """
    if isinstance(tag, SourceFormat):
        return tag
    if not isinstance(tag, str):
        raise UnsupportedFormatError(str(tag))
    try:
        return _ALIASES[tag.strip().lower()]
    except KeyError:
        raise UnsupportedFormatError(tag) from None


def infer_format(path: str | PurePath) -> SourceFormat:
    """Pick a SourceFormat from a file suffix."""
    suffix = PurePath(path).suffix.lower()
    source_format = _SUFFIXES.get(suffix)
    if source_format is None:
        raise UnsupportedFormatError(suffix or str(path))
    logger.debug("Inferred format %s from suffix of %s", source_format.value, path)
    return source_format
