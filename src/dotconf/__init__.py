"""dotconf - one dotted-key lookup over conf, ini, json and yaml files."""

from __future__ import annotations

# Entry points
from dotconf.loader import FileReader, build, load, read_bytes

# Accessor
from dotconf.config import ParsedConfig

# Formats
from dotconf.formats import ConfigFormat, SourceFormat, infer_format, resolve_format

# Options
from dotconf.options import ReaderOptions

# Errors
from dotconf.errors import (
    ConfigReaderError,
    DecodeError,
    ErrorCodes,
    KeyNotFoundError,
    UnsupportedFormatError,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "load",
    "build",
    "read_bytes",
    "FileReader",
    # Accessor
    "ParsedConfig",
    # Formats
    "ConfigFormat",
    "SourceFormat",
    "resolve_format",
    "infer_format",
    # Options
    "ReaderOptions",
    # Errors
    "ErrorCodes",
    "ConfigReaderError",
    "UnsupportedFormatError",
    "DecodeError",
    "KeyNotFoundError",
]
