"""Error hierarchy for the dotconf reader."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigReaderError",
    "UnsupportedFormatError",
    "DecodeError",
    "KeyNotFoundError",
    "ErrorCodes",
]


class ConfigReaderError(Exception):
    """Base error for all dotconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class UnsupportedFormatError(ConfigReaderError):
    """Raised when a format tag or file suffix is not recognised."""

    def __init__(self, format_tag: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_FORMAT",
            message=f"Unsupported file type: {format_tag!r}",
            details={"format": format_tag},
            **kwargs,
        )

    @property
    def format_tag(self) -> str:
        """The tag that could not be resolved."""
        return self.details["format"]


class DecodeError(ConfigReaderError):
    """Raised when content is malformed for its declared format."""

    def __init__(self, source_format: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DECODE_ERROR",
            message=f"Cannot decode {source_format} content: {reason}",
            details={"source_format": source_format, "reason": reason},
            **kwargs,
        )

    @property
    def source_format(self) -> str:
        """The source format the content was decoded as."""
        return self.details["source_format"]


class KeyNotFoundError(ConfigReaderError, KeyError):
    """Raised when a lookup key is absent."""

    def __init__(self, key: str, section: str | None = None, **kwargs: Any) -> None:
        if section is None:
            message = f"key {key!r} not found"
        else:
            message = f"key {key!r} not found in section {section!r}"
        super().__init__(
            code="KEY_NOT_FOUND",
            message=message,
            details={"key": key, "section": section},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key that was looked up."""
        return self.details["key"]

    @property
    def section(self) -> str | None:
        """The section the key was looked up in, if one was named."""
        return self.details["section"]


class ErrorCodes:
    """All dotconf error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_fallback()
    """

    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    DECODE_ERROR = "DECODE_ERROR"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
