"""Entry points: build a config from bytes or load one from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Union

from dotconf.config import ParsedConfig
from dotconf.decoders import decode
from dotconf.formats import SourceFormat, infer_format, resolve_format
from dotconf.options import ReaderOptions

__all__ = ["FileReader", "build", "load", "read_bytes"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

FileReader = Callable[[str], bytes]
"""Reads the whole file at a path. Any exception it raises reaches the caller unchanged."""


def read_bytes(path: str) -> bytes:
    """Default file reader."""
    return Path(path).read_bytes()


def build(
    format: str | SourceFormat,
    content: bytes | str,
    options: ReaderOptions | None = None,
) -> ParsedConfig:
    """Decode ``content`` as ``format`` and wrap it in a ParsedConfig.

    Raises:
        UnsupportedFormatError: ``format`` is not a known tag.
        DecodeError: ``content`` is malformed for ``format``.
    """
    source_format = resolve_format(format)
    data = decode(source_format, content, options)
    return ParsedConfig.from_decoded(source_format, data)


def load(
    path: PathLike,
    format: str | SourceFormat | None = None,
    *,
    read_file: FileReader = read_bytes,
    options: ReaderOptions | None = None,
) -> ParsedConfig:
    """Read the file at ``path`` and build a ParsedConfig from it.

    ``format`` may be any supported tag or alias; when omitted it is taken
    from the file suffix. The format is resolved before the file is read.
    Errors raised by ``read_file`` propagate as they are.
    """
    if format is None:
        source_format = infer_format(path)
    else:
        source_format = resolve_format(format)

    content = read_file(str(path))
    logger.debug("Read %d bytes from %s", len(content), path)
    return build(source_format, content, options)
