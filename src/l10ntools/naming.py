"""Locale handling for localization file names.

Source files follow ``<name>[-strings]_<locale>.<ext>``; a name without a
locale segment is the English default bundle.
"""

from enum import Enum

from .errors import FormatError

DEFAULT_LOCALE = "en"
STRINGS_MARKER = "-strings"


class LocaleStyle(Enum):
    """How a locale is spelled in a destination file name."""
    BARE = "bare"
    HYPHENATED = "hyphenated"


def locale_from_filename(name: str) -> str:
    """Derive the locale of a localization file from its name.

    Args:
        name: File name such as ``foo-strings_es.properties``.

    Returns:
        The locale token, ``"en"`` when the name has no ``_`` segment.

    Raises:
        FormatError: If the locale segment is not followed by an extension.
    """
    if "_" not in name:
        return DEFAULT_LOCALE

    tail = name[name.index("_") + 1:]
    if "." not in tail:
        raise FormatError(f"No extension after locale in file name: {name}")
    return tail[:tail.index(".")]


def format_locale(locale: str, style: LocaleStyle) -> str:
    """Spell a locale in the given destination style.

    >>> format_locale("zh_CN", LocaleStyle.HYPHENATED)
    'zh-cn'
    """
    if style is LocaleStyle.HYPHENATED:
        return locale.lower().replace("_", "-")
    return locale


def json_filename(name: str, marker: str = STRINGS_MARKER) -> str:
    """Name of the JSON string file generated from a .properties file.

    ``foo-strings_zh_CN.properties`` becomes ``foo-strings_zh-cn.json``.

    Raises:
        FormatError: If the name lacks the marker or a well-formed locale.
    """
    if marker not in name:
        raise FormatError(f"Missing '{marker}' in file name: {name}")

    prefix = name[:name.index(marker)]
    locale = format_locale(locale_from_filename(name), LocaleStyle.HYPHENATED)
    return f"{prefix}{marker}_{locale}.json"


def properties_filename(xml_name: str) -> str:
    """Name of the .properties file generated from an XML strings file.

    The English file becomes the default bundle, so its ``_en`` suffix is dropped.
    """
    name = xml_name.replace(".xml", ".properties")
    return name.replace(f"_{DEFAULT_LOCALE}.properties", ".properties")


def is_strings_properties(name: str, suffix: str = ".properties", marker: str = STRINGS_MARKER) -> bool:
    """Check whether a file name is a .properties string file."""
    return name.endswith(suffix) and marker in name


def is_xml(name: str, suffix: str = ".xml") -> bool:
    """Check whether a file name is an XML strings file."""
    return name.endswith(suffix)
