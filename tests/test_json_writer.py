"""Tests for the JSON string file writer."""

import json

import pytest

from l10ntools.strings import JsonWriter, StringTable
from l10ntools.strings.json_writer import escape, write_json


class TestEscape:
    """Tests for the minimal JSON escaping."""

    def test_quotes_and_newlines(self):
        assert escape('say "hi"\nnow') == 'say \\"hi\\"\\nnow'

    def test_other_characters_untouched(self):
        """Test that tabs, backslashes and non-ASCII text are written verbatim."""
        value = "tab\there \\ back ñ"
        assert escape(value) == value


class TestJsonWriter:
    """Tests for JsonWriter."""

    @pytest.fixture
    def writer(self):
        return JsonWriter()

    def test_empty_table(self, writer):
        assert writer.format(StringTable()) == "{\n}"

    def test_single_key_has_no_trailing_comma(self, writer):
        table = StringTable.from_dict({"a": 'x"y'})
        assert writer.format(table) == '{\n    "a": "x\\"y"\n}'

    def test_multiple_keys(self, writer):
        table = StringTable.from_dict({"a": "1", "b": "2"})
        assert writer.format(table) == '{\n    "a": "1",\n    "b": "2"\n}'

    def test_key_filter(self, writer):
        table = StringTable.from_dict({"button.label": "OK", "title": "Hi"})
        assert writer.format(table, "button") == '{\n    "button.label": "OK"\n}'

    def test_key_filter_matching_nothing(self, writer):
        table = StringTable.from_dict({"title": "Hi"})
        assert writer.format(table, "button") == "{\n}"

    def test_output_is_valid_json(self, writer):
        """Test that a conformant reader recovers the table."""
        values = {"a": "plain", "b": 'with "quotes"', "c": "multi\nline", "d": "ünïcødé"}
        parsed = json.loads(writer.format(StringTable.from_dict(values)))
        assert parsed == values

    def test_write(self, tmp_path):
        path = tmp_path / "out" / "sim-strings_en.json"
        write_json(StringTable.from_dict({"title": "Hi", "other": "x"}), path, key_filter="title")
        assert path.read_text(encoding="utf-8") == '{\n    "title": "Hi"\n}'

    def test_write_lone_surrogate(self, writer, tmp_path):
        """Test that characters the encoding cannot hold are replaced, not fatal."""
        path = tmp_path / "sim-strings_es.json"
        writer.write(StringTable.from_dict({"a": "x" + chr(0xD800) + "y"}), path)
        assert path.read_bytes() == b'{\n    "a": "x?y"\n}'
