"""Decoder options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["ReaderOptions"]


class ReaderOptions(BaseModel):
    """Settings that control how raw bytes are decoded.

    Attributes:
        encoding: Text encoding of the source bytes.
        comment_prefixes: Line prefixes treated as comments in flat files.
        ini_comment_prefixes: Line prefixes treated as comments in sectioned files.
        ini_delimiters: Key/value separators accepted in sectioned files.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"
    comment_prefixes: tuple[str, ...] = ("#",)
    ini_comment_prefixes: tuple[str, ...] = ("#", ";")
    ini_delimiters: tuple[str, ...] = ("=", ":")

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        # Rejects unknown codecs and binary ones such as rot13 or base64.
        try:
            b"".decode(v)
        except LookupError as exc:
            raise ValueError(f"Not a text encoding: {v}") from exc
        return v

    @field_validator("comment_prefixes", "ini_comment_prefixes", "ini_delimiters")
    @classmethod
    def no_empty_markers(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not marker for marker in v):
            raise ValueError("Markers must be non-empty strings")
        return v

    @field_validator("ini_delimiters")
    @classmethod
    def at_least_one_delimiter(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("At least one delimiter is required")
        return v
