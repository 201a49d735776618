"""Batch converters between string table formats."""

import logging
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from ..config import ConverterConfig
from ..naming import is_strings_properties, is_xml, json_filename, properties_filename
from ..strings import JsonWriter, PropertiesParser, XmlStringsParser

logger = logging.getLogger(__name__)


@dataclass
class ConversionReport:
    """Report of a conversion run.

    Attributes:
        source_dir: Directory the source files were read from.
        destination_dir: Directory the output files were written to.
        files_written: Output files, in processing order.
    """
    source_dir: Path
    destination_dir: Path
    files_written: list[Path] = field(default_factory=list)


def list_sources(source_dir: Path, accept: Callable[[str], bool]) -> list[Path]:
    """List the files of a directory whose names pass ``accept``, sorted by name.

    Raises:
        OSError: If the directory cannot be listed.
    """
    return sorted(
        path for path in Path(source_dir).iterdir()
        if path.is_file() and accept(path.name)
    )


class PropertiesToJsonConverter:
    """Converts ``*-strings*.properties`` files to JSON string files."""

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self.parser = PropertiesParser()
        self.writer = JsonWriter()

    def accepts(self, name: str) -> bool:
        return is_strings_properties(
            name,
            suffix=self.config.properties_suffix,
            marker=self.config.strings_marker
        )

    def convert(
        self,
        source_dir: Path,
        destination_dir: Path,
        key_filter: Optional[str] = None
    ) -> ConversionReport:
        """Convert every matching file of ``source_dir`` into ``destination_dir``.

        Processing stops at the first file that fails.

        Args:
            source_dir: Directory holding the .properties files.
            destination_dir: Directory for the JSON files.
            key_filter: Only keys containing this substring are written.

        Returns:
            ConversionReport listing the files written.
        """
        report = ConversionReport(source_dir=source_dir, destination_dir=destination_dir)

        for source in list_sources(source_dir, self.accepts):
            target = destination_dir / json_filename(source.name, self.config.strings_marker)
            logger.info("Converting %s -> %s", source.name, target.name)

            table = self.parser.parse_file(source)
            self.writer.write(table, target, key_filter, encoding=self.config.encoding)
            report.files_written.append(target)

        return report


class XmlToPropertiesConverter:
    """Converts XML string translation files to .properties files."""

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self.parser = XmlStringsParser()
        self.writer = PropertiesParser()

    def accepts(self, name: str) -> bool:
        return is_xml(name, suffix=self.config.xml_suffix)

    def convert(self, source_dir: Path, destination_dir: Path) -> ConversionReport:
        """Convert every XML file of ``source_dir`` into ``destination_dir``.

        The destination directory is created if needed. Processing stops at
        the first file that fails.
        """
        destination_dir.mkdir(parents=True, exist_ok=True)
        report = ConversionReport(source_dir=source_dir, destination_dir=destination_dir)

        for source in list_sources(source_dir, self.accepts):
            target = destination_dir / properties_filename(source.name)
            logger.info("Converting %s -> %s", source.name, target.name)

            table = self.parser.parse_file(source)
            self.writer.write(
                table,
                target,
                header=self.config.properties_header,
                encoding=self.config.encoding
            )
            report.files_written.append(target)

        return report


class XmlToI18nConverter:
    """Converts XML string files to JSON string files in two stages.

    XML is first converted to .properties in a temporary directory, which is
    then converted to JSON. The temporary directory is removed whether or
    not the conversion succeeds.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self.xml_converter = XmlToPropertiesConverter(self.config)
        self.json_converter = PropertiesToJsonConverter(self.config)

    def convert(self, source_dir: Path, destination_dir: Path) -> ConversionReport:
        with tempfile.TemporaryDirectory(prefix="l10ntools-") as tmpdir:
            staging = Path(tmpdir)
            logger.debug("Staging .properties files in %s", staging)

            self.xml_converter.convert(source_dir, staging)
            report = self.json_converter.convert(staging, destination_dir)

        return ConversionReport(
            source_dir=source_dir,
            destination_dir=destination_dir,
            files_written=report.files_written
        )
