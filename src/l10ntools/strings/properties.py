"""Parser and writer for Java .properties files."""

import logging
import re
from pathlib import Path
from typing import Optional

from ..errors import ParseError
from .models import StringEntry, StringTable

logger = logging.getLogger(__name__)

WHITESPACE = " \t\f"
SEPARATORS = "=:"

# Characters that always need a backslash when written
SPECIAL_CHARS = "=:#!"

ESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _ends_with_continuation(line: str) -> bool:
    """Check whether a line ends in an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _combine_surrogates(s: str) -> str:
    """Join UTF-16 surrogate pairs produced by consecutive \\u escapes."""
    return s.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def unescape(s: str) -> str:
    """Resolve .properties escape sequences.

    Args:
        s: Raw key or value text.

    Returns:
        The unescaped text.

    Raises:
        ParseError: If a \\u escape is not followed by four hex digits.
    """
    result = []
    i = 0
    while i < len(s):
        c = s[i]
        if c != "\\" or i + 1 >= len(s):
            result.append(c)
            i += 1
            continue
        next_char = s[i + 1]
        if next_char == "u":
            digits = s[i + 2:i + 6]
            if len(digits) != 4 or not all(d in "0123456789abcdefABCDEF" for d in digits):
                raise ParseError(f"Malformed \\uxxxx encoding: \\u{digits}")
            result.append(chr(int(digits, 16)))
            i += 6
        else:
            result.append(ESCAPES.get(next_char, next_char))
            i += 2
    return _combine_surrogates("".join(result))


def escape(s: str, escape_space: bool) -> str:
    """Escape text for writing to a .properties file.

    Args:
        s: Key or value text.
        escape_space: Escape every space (keys) instead of only a leading one (values).

    Returns:
        ASCII-only escaped text.
    """
    result = []
    for index, c in enumerate(s):
        if c == "\\":
            result.append("\\\\")
        elif c == " ":
            result.append("\\ " if escape_space or index == 0 else " ")
        elif c == "\t":
            result.append("\\t")
        elif c == "\n":
            result.append("\\n")
        elif c == "\r":
            result.append("\\r")
        elif c == "\f":
            result.append("\\f")
        elif c in SPECIAL_CHARS:
            result.append("\\" + c)
        elif c < " " or c > "~":
            units = c.encode("utf-16-be", "surrogatepass")
            for j in range(0, len(units), 2):
                result.append(f"\\u{int.from_bytes(units[j:j + 2], 'big'):04X}")
        else:
            result.append(c)
    return "".join(result)


class PropertiesParser:
    """Parser for Java .properties files.

    Follows the rules of ``java.util.Properties``: ``#`` and ``!`` comments,
    backslash line continuations, ``=``, ``:`` or whitespace separators and
    ``\\uXXXX`` escapes. Comments directly above an entry are kept on it.
    """

    def parse(self, content: str) -> StringTable:
        """Parse .properties content into a StringTable.

        Args:
            content: The content of a .properties file.

        Returns:
            StringTable with one entry per key; later duplicates win.

        Raises:
            ParseError: If the content contains a malformed escape.
        """
        table = StringTable()
        comments: list[str] = []

        lines = LINE_BREAK.split(content)
        i = 0
        while i < len(lines):
            line = lines[i].lstrip(WHITESPACE)
            i += 1

            if not line:
                comments = []
                continue

            if line[0] in "#!":
                comments.append(line[1:].strip())
                continue

            # Join continuation lines into one logical line
            while _ends_with_continuation(line):
                line = line[:-1]
                if i >= len(lines):
                    break
                line += lines[i].lstrip(WHITESPACE)
                i += 1

            key, value = self._split(line)
            table.set(
                unescape(key),
                unescape(value),
                comment="\n".join(comments) if comments else None,
            )
            comments = []

        return table

    @staticmethod
    def _split(line: str) -> tuple[str, str]:
        """Split a logical line into raw key and value text."""
        key_end = len(line)
        has_separator = False
        backslash = False
        for index, c in enumerate(line):
            if backslash:
                backslash = False
                continue
            if c == "\\":
                backslash = True
            elif c in SEPARATORS:
                key_end = index
                has_separator = True
                break
            elif c in WHITESPACE:
                key_end = index
                break

        value_start = key_end + 1 if has_separator else key_end
        while value_start < len(line):
            c = line[value_start]
            if c not in WHITESPACE:
                if not has_separator and c in SEPARATORS:
                    has_separator = True
                else:
                    break
            value_start += 1

        return line[:key_end], line[value_start:]

    def parse_file(self, path: Path) -> StringTable:
        """Parse a .properties file.

        Reads UTF-8 and falls back to ISO-8859-1, the historical encoding
        of .properties files.

        Args:
            path: Path to the .properties file.

        Returns:
            StringTable parsed from the file.

        Raises:
            OSError: If the file cannot be read.
            ParseError: If the content is malformed.
        """
        raw = Path(path).read_bytes()
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError:
            content = raw.decode("iso-8859-1")

        try:
            return self.parse(content)
        except ParseError as exc:
            raise ParseError(str(exc), path) from exc

    def format(self, table: StringTable, header: Optional[str] = None) -> str:
        """Format a StringTable as .properties content.

        Args:
            table: Table to format.
            header: Optional comment written as the first lines.

        Returns:
            Formatted .properties content.
        """
        lines = []
        if header is not None:
            lines.extend(f"#{line}" for line in header.split("\n"))
            lines.append("")

        for entry in table.entries():
            if entry.comment:
                lines.extend(f"# {line}" for line in entry.comment.split("\n"))
            lines.append(f"{escape(entry.key, True)}={escape(entry.value, False)}")

        return "\n".join(lines) + "\n"

    def write(
        self,
        table: StringTable,
        path: Path,
        header: Optional[str] = None,
        encoding: str = "utf-8"
    ) -> None:
        """Write a StringTable to a .properties file.

        Args:
            table: Table to write.
            path: Path to the output file.
            header: Optional header comment.
            encoding: File encoding.
        """
        content = self.format(table, header)

        data = content.encode(encoding, errors="replace")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.debug("Wrote %d entries to %s", len(table), path)


def load(path: Path) -> StringTable:
    """Load a .properties file into a StringTable."""
    return PropertiesParser().parse_file(path)


def write_properties(table: StringTable, path: Path) -> None:
    """Write a StringTable as a .properties file."""
    PropertiesParser().write(table, path)
