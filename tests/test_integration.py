"""Integration tests for the directory converters."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from l10ntools.config import ConverterConfig
from l10ntools.errors import ParseError
from l10ntools.pipeline import (
    PropertiesToJsonConverter,
    XmlToI18nConverter,
    XmlToPropertiesConverter,
)
from l10ntools.strings import PropertiesParser

XML_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<strings>
{}
</strings>
"""


def write_xml(path: Path, values: dict[str, str]) -> None:
    elements = "\n".join(f'  <string key="{k}" value="{v}"/>' for k, v in values.items())
    path.write_text(XML_TEMPLATE.format(elements), encoding="utf-8")


@pytest.fixture
def workspace():
    """Create source and destination directories."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        (base / "source").mkdir()
        yield base


class TestPropertiesToJsonConverter:
    """Tests for PropertiesToJsonConverter."""

    def test_convert(self, workspace):
        source = workspace / "source"
        (source / "skate-strings.properties").write_text("title=Skate\nreset=Reset\n", encoding="utf-8")
        (source / "skate-strings_es.properties").write_text("title=Patinar\n", encoding="utf-8")
        (source / "skate-strings_zh_CN.properties").write_text("title=\\u6ed1\n", encoding="utf-8")
        (source / "other.properties").write_text("ignored=1\n", encoding="utf-8")
        (source / "skate-strings_fr.txt").write_text("ignored=1\n", encoding="utf-8")

        dest = workspace / "dest"
        report = PropertiesToJsonConverter().convert(source, dest)

        assert sorted(p.name for p in report.files_written) == [
            "skate-strings_en.json",
            "skate-strings_es.json",
            "skate-strings_zh-cn.json",
        ]
        assert (dest / "skate-strings_en.json").read_text(encoding="utf-8") == (
            '{\n    "title": "Skate",\n    "reset": "Reset"\n}'
        )
        assert (dest / "skate-strings_zh-cn.json").read_text(encoding="utf-8") == (
            '{\n    "title": "' + chr(0x6ED1) + '"\n}'
        )

    def test_convert_with_key_filter(self, workspace):
        source = workspace / "source"
        (source / "sim-strings.properties").write_text(
            "button.label=OK\ntitle=Hi\n", encoding="utf-8"
        )
        dest = workspace / "dest"

        PropertiesToJsonConverter().convert(source, dest, key_filter="button")

        assert (dest / "sim-strings_en.json").read_text(encoding="utf-8") == (
            '{\n    "button.label": "OK"\n}'
        )

    def test_convert_fails_fast(self, workspace):
        """Test that a malformed file aborts the whole run."""
        source = workspace / "source"
        (source / "a-strings_bad.properties").write_text("key=\\uXYZW\n", encoding="utf-8")
        (source / "b-strings.properties").write_text("key=ok\n", encoding="utf-8")
        dest = workspace / "dest"

        with pytest.raises(ParseError):
            PropertiesToJsonConverter().convert(source, dest)
        assert not (dest / "b-strings_en.json").exists()

    def test_custom_marker(self, workspace):
        source = workspace / "source"
        (source / "sim-strings_de.props").write_text("a=1\n", encoding="utf-8")
        config = ConverterConfig(properties_suffix=".props")

        report = PropertiesToJsonConverter(config).convert(source, workspace / "dest")
        assert [p.name for p in report.files_written] == ["sim-strings_de.json"]

    def test_custom_strings_marker(self, workspace):
        """Test that a non-default marker selects and names the output files."""
        source = workspace / "source"
        (source / "sim-text_es.properties").write_text("a=1\n", encoding="utf-8")
        (source / "sim-strings_es.properties").write_text("b=2\n", encoding="utf-8")
        config = ConverterConfig(strings_marker="-text")

        report = PropertiesToJsonConverter(config).convert(source, workspace / "dest")

        assert [p.name for p in report.files_written] == ["sim-text_es.json"]
        assert (workspace / "dest" / "sim-text_es.json").read_text(encoding="utf-8") == (
            '{\n    "a": "1"\n}'
        )


class TestXmlToPropertiesConverter:
    """Tests for XmlToPropertiesConverter."""

    def test_convert(self, workspace):
        source = workspace / "source"
        write_xml(source / "skate-strings_en.xml", {"title": "Skate", "msg": "a = b"})
        write_xml(source / "skate-strings_es.xml", {"title": "Patinar"})
        dest = workspace / "out" / "nls"

        report = XmlToPropertiesConverter().convert(source, dest)

        assert [p.name for p in report.files_written] == [
            "skate-strings.properties",
            "skate-strings_es.properties",
        ]
        table = PropertiesParser().parse_file(dest / "skate-strings.properties")
        assert table.to_dict() == {"title": "Skate", "msg": "a = b"}

    def test_header(self, workspace):
        source = workspace / "source"
        write_xml(source / "sim_fr.xml", {"a": "1"})
        config = ConverterConfig(properties_header="Generated from XML")

        XmlToPropertiesConverter(config).convert(source, workspace / "dest")
        content = (workspace / "dest" / "sim_fr.properties").read_text(encoding="utf-8")
        assert content.startswith("#Generated from XML\n")

    def test_malformed_xml(self, workspace):
        source = workspace / "source"
        (source / "bad.xml").write_text("<strings>", encoding="utf-8")

        with pytest.raises(ParseError):
            XmlToPropertiesConverter().convert(source, workspace / "dest")


class TestXmlToI18nConverter:
    """Tests for the two-stage XML to JSON converter."""

    def test_convert(self, workspace):
        source = workspace / "source"
        write_xml(source / "skate-strings_en.xml", {"title": "Skate", "quote": "&quot;go&quot;"})
        write_xml(source / "skate-strings_pt_BR.xml", {"title": "Skate BR"})
        dest = workspace / "dest"

        report = XmlToI18nConverter().convert(source, dest)

        assert report.source_dir == source
        assert sorted(p.name for p in report.files_written) == [
            "skate-strings_en.json",
            "skate-strings_pt-br.json",
        ]
        assert (dest / "skate-strings_en.json").read_text(encoding="utf-8") == (
            '{\n    "title": "Skate",\n    "quote": "\\"go\\""\n}'
        )

    def test_temporary_directory_removed(self, workspace):
        source = workspace / "source"
        write_xml(source / "sim-strings_en.xml", {"a": "1"})
        staging = workspace / "staging"
        converter = XmlToI18nConverter()

        real_convert = converter.xml_converter.convert

        def record_staging(src, dst):
            staging.write_text(str(dst), encoding="utf-8")
            return real_convert(src, dst)

        with patch.object(converter.xml_converter, "convert", side_effect=record_staging):
            converter.convert(source, workspace / "dest")

        assert not Path(staging.read_text(encoding="utf-8")).exists()

    def test_temporary_directory_removed_on_failure(self, workspace):
        source = workspace / "source"
        (source / "bad.xml").write_text("<strings>", encoding="utf-8")
        staging = workspace / "staging"
        converter = XmlToI18nConverter()

        real_convert = converter.xml_converter.convert

        def record_staging(src, dst):
            staging.write_text(str(dst), encoding="utf-8")
            return real_convert(src, dst)

        with patch.object(converter.xml_converter, "convert", side_effect=record_staging):
            with pytest.raises(ParseError):
                converter.convert(source, workspace / "dest")

        assert not Path(staging.read_text(encoding="utf-8")).exists()
