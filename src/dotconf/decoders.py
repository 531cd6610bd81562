"""Format decoders: raw bytes to flat maps, section tables or nested trees."""

from __future__ import annotations

import configparser
import json
import logging
from typing import Any, Callable

import yaml

from dotconf.errors import DecodeError
from dotconf.formats import SourceFormat, resolve_format
from dotconf.options import ReaderOptions

__all__ = [
    "ROOT_SECTION",
    "decode",
    "decode_flat",
    "decode_sectioned",
    "decode_json",
    "decode_yaml",
]

logger = logging.getLogger(__name__)

ROOT_SECTION = ""

# Header injected ahead of the content so keys before the first real
# section header are collected instead of rejected.
_ROOT_HEADER = "\x00root"
_NO_DEFAULTS = "\x00defaults"

_BOM = "\ufeff"


def _to_text(content: bytes | str, source_format: SourceFormat, options: ReaderOptions) -> str:
    if isinstance(content, str):
        text = content
    else:
        try:
            text = content.decode(options.encoding)
        except UnicodeDecodeError as exc:
            raise DecodeError(
                source_format.value,
                f"content is not valid {options.encoding} text",
                cause=exc,
            ) from exc
    return text[1:] if text.startswith(_BOM) else text


def decode_flat(text: str, options: ReaderOptions | None = None) -> dict[str, str]:
    """Parse ``key = value`` lines into a flat mapping.

    The value is everything after the first ``=``; both sides are trimmed.
    Blank lines and comment lines are ignored, lines without ``=`` are skipped.
    """
    options = options or ReaderOptions()
    result: dict[str, str] = {}
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line or line.startswith(options.comment_prefixes):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            logger.warning("Skipping line %d without '=' in flat config", lineno)
            continue
        result[key.strip()] = value.strip()
    return result


def decode_sectioned(text: str, options: ReaderOptions | None = None) -> dict[str, dict[str, str]]:
    """Parse INI-style text into a section table.

    Keys that appear before any section header land in the ``""`` section.
    Key names keep their case, ``[DEFAULT]`` is an ordinary section and
    duplicate keys resolve to the last value.
    """
    options = options or ReaderOptions()
    parser = configparser.ConfigParser(
        delimiters=options.ini_delimiters,
        comment_prefixes=options.ini_comment_prefixes,
        strict=False,
        interpolation=None,
        default_section=_NO_DEFAULTS,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        parser.read_string(f"[{_ROOT_HEADER}]\n{text}")
    except configparser.ParsingError as exc:
        # Line numbers count the injected header.
        reason = "; ".join(f"line {lineno - 1}: {line}" for lineno, line in exc.errors)
        raise DecodeError(SourceFormat.INI.value, reason, cause=exc) from exc
    except configparser.Error as exc:
        raise DecodeError(SourceFormat.INI.value, str(exc), cause=exc) from exc

    table: dict[str, dict[str, str]] = {ROOT_SECTION: {}}
    for section in parser.sections():
        name = ROOT_SECTION if section == _ROOT_HEADER else section
        table.setdefault(name, {}).update(parser.items(section, raw=True))
    return table


def _check_document(data: Any, source_format: SourceFormat) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(
            source_format.value,
            f"top-level value must be a mapping, got {type(data).__name__}",
        )
    return data


def decode_json(text: str, options: ReaderOptions | None = None) -> dict[str, Any]:
    """Parse a JSON document whose top level is an object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(SourceFormat.JSON.value, str(exc), cause=exc) from exc
    return _check_document(data, SourceFormat.JSON)


def decode_yaml(text: str, options: ReaderOptions | None = None) -> dict[str, Any]:
    """Parse a YAML document whose top level is a mapping.

    An empty document decodes to an empty mapping.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DecodeError(SourceFormat.YAML.value, f"YAML parse error: {exc}", cause=exc) from exc
    return _check_document(data, SourceFormat.YAML)


_DECODERS: dict[SourceFormat, Callable[[str, ReaderOptions], dict[str, Any]]] = {
    SourceFormat.CONF: decode_flat,
    SourceFormat.INI: decode_sectioned,
    SourceFormat.JSON: decode_json,
    SourceFormat.YAML: decode_yaml,
}


def decode(
    source_format: str | SourceFormat,
    content: bytes | str,
    options: ReaderOptions | None = None,
) -> dict[str, Any]:
    """Decode ``content`` according to ``source_format``.

    The format is resolved before the content is looked at, so an unknown
    tag raises UnsupportedFormatError even for empty content.
    """
    fmt = resolve_format(source_format)
    options = options or ReaderOptions()
    text = _to_text(content, fmt, options)
    data = _DECODERS[fmt](text, options)
    logger.debug("Decoded %s content with %d top-level entries", fmt.value, len(data))
    return data
