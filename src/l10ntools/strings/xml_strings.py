"""Parser for XML string translation files."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from ..errors import ParseError
from .models import StringTable

STRING_TAG = "string"


class XmlStringsParser:
    """Reads ``<string key=".." value=".."/>`` elements into a StringTable.

    Elements are collected from anywhere in the document. A missing
    attribute reads as an empty string, and a repeated key keeps the value
    of its last element.
    """

    def parse(self, content: Union[str, bytes]) -> StringTable:
        """Parse an XML document into a StringTable.

        Args:
            content: The XML document.

        Returns:
            StringTable of key/value attribute pairs.

        Raises:
            ParseError: If the document is not well-formed.
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise ParseError(f"Malformed XML: {exc}") from exc

        table = StringTable()
        for element in root.iter(STRING_TAG):
            table.set(element.get("key", ""), element.get("value", ""))
        return table

    def parse_file(self, path: Path) -> StringTable:
        """Parse an XML strings file.

        Raises:
            OSError: If the file cannot be read.
            ParseError: If the document is not well-formed.
        """
        # Bytes let the parser honour the encoding declared in the document
        raw = Path(path).read_bytes()
        try:
            return self.parse(raw)
        except ParseError as exc:
            raise ParseError(str(exc), path) from exc


def load(path: Path) -> StringTable:
    """Load the ``<string>`` elements of an XML file into a StringTable."""
    return XmlStringsParser().parse_file(path)
