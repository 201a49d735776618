"""Writer for the JSON string files loaded by the simulations."""

import logging
from pathlib import Path
from typing import Optional

from .models import StringTable

logger = logging.getLogger(__name__)

INDENT = "    "


def escape(value: str) -> str:
    """Escape a value for the JSON string files.

    Only double quotes and newlines are escaped; every other character,
    including backslashes and non-ASCII text, is written as is.
    """
    return value.replace('"', '\\"').replace("\n", "\\n")


class JsonWriter:
    """Serializes string tables as flat JSON objects."""

    def format(self, table: StringTable, key_filter: Optional[str] = None) -> str:
        """Format a StringTable as a JSON object.

        Args:
            table: Table to format.
            key_filter: If given, only keys containing this substring are written.

        Returns:
            JSON text, ``{\\n}`` when no key is written.
        """
        lines = [
            f'{INDENT}"{key}": "{escape(value)}"'
            for key, value in table.filter(key_filter).items()
        ]
        if not lines:
            return "{\n}"
        return "{\n" + ",\n".join(lines) + "\n}"

    def write(
        self,
        table: StringTable,
        path: Path,
        key_filter: Optional[str] = None,
        encoding: str = "utf-8"
    ) -> None:
        """Write a StringTable to a JSON file.

        Args:
            table: Table to write.
            path: Path to the output file.
            key_filter: Optional key substring filter.
            encoding: File encoding.
        """
        content = self.format(table, key_filter)
        logger.debug("JSON for %s:\n%s", path.name, content)

        # Unencodable characters such as lone surrogates become "?"
        data = content.encode(encoding, errors="replace")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


def write_json(table: StringTable, path: Path, key_filter: Optional[str] = None) -> None:
    """Write a StringTable as a JSON string file."""
    JsonWriter().write(table, path, key_filter)
