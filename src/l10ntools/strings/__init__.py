"""String table models, parsers and writers."""

from .json_writer import JsonWriter
from .models import StringEntry, StringTable
from .properties import PropertiesParser
from .xml_strings import XmlStringsParser

__all__ = ["StringEntry", "StringTable", "PropertiesParser", "JsonWriter", "XmlStringsParser"]
