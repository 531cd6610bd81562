"""Configuration accessor with dot-path key support."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dotconf.decoders import ROOT_SECTION
from dotconf.errors import KeyNotFoundError
from dotconf.formats import ConfigFormat, SourceFormat
from dotconf.values import freeze_tree, render_value

__all__ = ["ParsedConfig"]

_MISSING: Any = object()

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _empty() -> Mapping[str, Any]:
    return _EMPTY


@dataclass(frozen=True, eq=False)
class ParsedConfig:
    """A decoded configuration file answering dotted-key lookups.

    Exactly one of ``flat_map``, ``section_table`` and ``nested_tree`` holds
    data; which one is fixed by ``format``. All three are exposed as
    read-only views, so an instance can be shared freely once built.

    Attributes:
        format: Addressing shape used by :meth:`get`.
        source_format: Encoding the data was decoded from.
        flat_map: Key to value mapping for flat files.
        section_table: Section name to key/value mapping for sectioned files.
            Keys given before any section header live under ``""``.
        nested_tree: Decoded document for JSON and YAML files.
    """

    format: ConfigFormat
    source_format: SourceFormat
    flat_map: Mapping[str, str] = field(default_factory=_empty)
    section_table: Mapping[str, Mapping[str, str]] = field(default_factory=_empty)
    nested_tree: Mapping[str, Any] = field(default_factory=_empty)

    def __post_init__(self) -> None:
        if self.source_format.config_format is not self.format:
            raise ValueError(
                f"Source format {self.source_format.value!r} does not decode to {self.format.value!r}"
            )
        payloads = {
            ConfigFormat.FLAT: self.flat_map,
            ConfigFormat.SECTIONED: self.section_table,
            ConfigFormat.NESTED: self.nested_tree,
        }
        for fmt, payload in payloads.items():
            if fmt is not self.format and payload:
                raise ValueError(f"A {self.format.value} config cannot carry {fmt.value} data")

        # frozen: bypass __setattr__ to store the read-only copies
        object.__setattr__(self, "flat_map", MappingProxyType(dict(self.flat_map)))
        object.__setattr__(
            self,
            "section_table",
            MappingProxyType(
                {name: MappingProxyType(dict(keys)) for name, keys in self.section_table.items()}
            ),
        )
        object.__setattr__(self, "nested_tree", freeze_tree(self.nested_tree))

    @classmethod
    def from_decoded(cls, source_format: SourceFormat, data: Mapping[str, Any]) -> ParsedConfig:
        """Wrap decoder output in a config tagged with its addressing shape."""
        fmt = source_format.config_format
        if fmt is ConfigFormat.FLAT:
            return cls(format=fmt, source_format=source_format, flat_map=data)
        if fmt is ConfigFormat.SECTIONED:
            return cls(format=fmt, source_format=source_format, section_table=data)
        return cls(format=fmt, source_format=source_format, nested_tree=data)

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Get a configuration value by dotted key, rendered as a string.

        Raises KeyNotFoundError when the key is absent, unless ``default``
        is given, in which case ``default`` is returned instead.
        """
        try:
            return self._lookup(key)
        except KeyNotFoundError:
            if default is _MISSING:
                raise
            return default

    def __getitem__(self, key: str) -> str:
        return self._lookup(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self._lookup(key)
        except KeyNotFoundError:
            return False
        return True

    def _lookup(self, key: str) -> str:
        if self.format is ConfigFormat.FLAT:
            return self._get_flat(key)
        if self.format is ConfigFormat.SECTIONED:
            return self._get_sectioned(key)
        return self._get_nested(key)

    def _get_flat(self, key: str) -> str:
        try:
            return self.flat_map[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def _get_sectioned(self, key: str) -> str:
        if "." not in key:
            keys = self.section_table.get(ROOT_SECTION, _EMPTY)
            if key not in keys:
                raise KeyNotFoundError(key)
            return keys[key]

        # Only the first dot separates section from key.
        section, _, name = key.partition(".")
        keys = self.section_table.get(section, _EMPTY)
        if name not in keys:
            raise KeyNotFoundError(name, section=section)
        return keys[name]

    def _get_nested(self, key: str) -> str:
        current: Any = self.nested_tree
        for part in key.split("."):
            if not isinstance(current, Mapping) or part not in current:
                raise KeyNotFoundError(key)
            current = current[part]
        return render_value(current)

    def keys(self) -> list[str]:
        """List every leaf key that :meth:`get` can resolve, in document order.

        Keys whose own name contains a dot cannot be told apart from a
        dotted path and are left out: root-section INI keys such as
        ``x.y``, INI sections named with a dot, and nested keys such as
        ``"a.b"``.
        """
        if self.format is ConfigFormat.FLAT:
            return list(self.flat_map)
        if self.format is ConfigFormat.SECTIONED:
            return [
                name if section == ROOT_SECTION else f"{section}.{name}"
                for section, keys in self.section_table.items()
                if "." not in section
                for name in keys
                if section != ROOT_SECTION or "." not in name
            ]
        return list(_leaf_paths(self.nested_tree, ()))

    def sections(self) -> list[str]:
        """Named sections, or top-level keys of a nested document."""
        if self.format is ConfigFormat.SECTIONED:
            return [name for name in self.section_table if name != ROOT_SECTION]
        if self.format is ConfigFormat.NESTED:
            return list(self.nested_tree)
        return []

    def __repr__(self) -> str:
        return f"ParsedConfig(format={self.format.value!r}, source_format={self.source_format.value!r})"


def _leaf_paths(tree: Mapping[str, Any], prefix: tuple[str, ...]) -> Iterator[str]:
    for name, value in tree.items():
        if "." in name:
            continue
        path = (*prefix, name)
        if isinstance(value, Mapping):
            yield from _leaf_paths(value, path)
        else:
            yield ".".join(path)
