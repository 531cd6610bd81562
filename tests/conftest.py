"""Shared fixtures: sample documents for each supported format."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

CONF_TEXT = """
# comment
key1=value1

key2 = value2
key3= value3
key4 = rAR#vW@='4EV
"""

INI_TEXT = """
[section1]
foo= bar
baz =bat

[section2]
qux = quux
"""

JSON_TEXT = """
{
  "section1": {
    "foo": "bar"
  },
  "plain": "top",
  "intkey": 22
}
"""

YAML_TEXT = """
section1:
  foo: bar
  baz: bat
plain: topvalue
"""


@pytest.fixture
def conf_text() -> str:
    return CONF_TEXT


@pytest.fixture
def ini_text() -> str:
    return INI_TEXT


@pytest.fixture
def json_text() -> str:
    return JSON_TEXT


@pytest.fixture
def yaml_text() -> str:
    return YAML_TEXT


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Returns a helper that writes text to a file under tmp_path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
