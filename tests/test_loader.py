"""Tests for the build and load entry points."""

from __future__ import annotations

import logging

import pytest

from dotconf.config import ParsedConfig
from dotconf.errors import DecodeError, UnsupportedFormatError
from dotconf.formats import ConfigFormat, SourceFormat
from dotconf.loader import build, load, read_bytes
from dotconf.options import ReaderOptions


class _RecordingReader:
    """File reader double that returns fixed bytes and records calls."""

    def __init__(self, content: bytes = b"", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[str] = []

    def __call__(self, path: str) -> bytes:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.content


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuild:
    @pytest.mark.parametrize(
        "tag, fixture_name, expected_format",
        [
            ("conf", "conf_text", ConfigFormat.FLAT),
            ("ini", "ini_text", ConfigFormat.SECTIONED),
            ("json", "json_text", ConfigFormat.NESTED),
            ("yaml", "yaml_text", ConfigFormat.NESTED),
        ],
    )
    def test_builds_each_format(self, request, tag, fixture_name, expected_format):
        config = build(tag, request.getfixturevalue(fixture_name))
        assert isinstance(config, ParsedConfig)
        assert config.format is expected_format

    @pytest.mark.parametrize("content", [b"", "", "key=value", "{}"])
    def test_unknown_format_always_fails(self, content):
        with pytest.raises(UnsupportedFormatError):
            build("unknown", content)

    @pytest.mark.parametrize(
        "tag, content",
        [
            ("ini", "invalid ini"),
            ("json", "{invalid json"),
            ("json", '{"section1": {"foo": "bar"}'),
            ("yaml", "invalid: [yaml"),
        ],
    )
    def test_malformed_content_fails(self, tag, content):
        with pytest.raises(DecodeError):
            build(tag, content)

    def test_options_are_used(self):
        config = build("conf", "// skipped = 1\nk = v", ReaderOptions(comment_prefixes=("//",)))
        assert config.keys() == ["k"]


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------


class TestLoad:
    def test_load_from_disk(self, write_config, ini_text):
        path = write_config("app.ini", ini_text)
        config = load(str(path), "ini")
        assert config.get("section1.foo") == "bar"

    def test_accepts_path_objects(self, write_config, json_text):
        path = write_config("app.json", json_text)
        assert load(path, "nested-json").get("intkey") == "22"

    def test_format_inferred_from_suffix(self, write_config, yaml_text):
        path = write_config("app.yml", yaml_text)
        config = load(path)
        assert config.source_format is SourceFormat.YAML
        assert config.get("plain") == "topvalue"

    def test_unknown_suffix_without_format(self, write_config):
        path = write_config("app.toml", "a = 1")
        with pytest.raises(UnsupportedFormatError):
            load(path)

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "absent.conf", "conf")

    def test_injected_reader(self):
        reader = _RecordingReader(b"username = foo\npassword = bar\n")
        config = load("dummy.conf", "conf", read_file=reader)
        assert reader.calls == ["dummy.conf"]
        assert config.get("password") == "bar"

    def test_reader_error_propagates_unchanged(self):
        error = RuntimeError("mock read error")
        reader = _RecordingReader(error=error)
        with pytest.raises(RuntimeError) as exc_info:
            load("dummy.conf", "conf", read_file=reader)
        assert exc_info.value is error
        assert str(exc_info.value) == "mock read error"

    def test_unsupported_format_skips_read(self):
        reader = _RecordingReader(b"k=v")
        with pytest.raises(UnsupportedFormatError):
            load("dummy.conf", "unknown", read_file=reader)
        assert reader.calls == []

    def test_decode_error_from_file(self, write_config):
        path = write_config("broken.json", "{invalid json")
        with pytest.raises(DecodeError):
            load(path, "json")

    def test_read_is_logged(self, caplog):
        reader = _RecordingReader(b"k=v")
        with caplog.at_level(logging.DEBUG, logger="dotconf"):
            load("dummy.conf", "conf", read_file=reader)
        assert "Read 3 bytes from dummy.conf" in caplog.text


class TestReadBytes:
    def test_reads_whole_file(self, tmp_path):
        path = tmp_path / "f.conf"
        path.write_bytes(b"a=1\n")
        assert read_bytes(str(path)) == b"a=1\n"
