"""Configuration for the conversion tools."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


# Dependencies shipped in the license directory that never end up in a built sim
DEFAULT_LICENSE_EXCLUDES = (
    "base64-binary",
    "howler",
    "json2",
    "numeric",
    "seedrandom",
    "tween",
    "revealjs",
)

LICENSE_BANNER = "#" * 54

IMAGE_EXTENSIONS = ("png", "jpg", "svg")


@dataclass
class ConverterConfig:
    """Configuration for the string table converters.

    Attributes:
        properties_suffix: Extension of .properties source files.
        strings_marker: Substring a .properties file name must contain.
        xml_suffix: Extension of XML source files.
        encoding: Encoding used for every file written.
        properties_header: Comment written at the top of generated .properties files.
    """
    properties_suffix: str = ".properties"
    strings_marker: str = "-strings"
    xml_suffix: str = ".xml"
    encoding: str = "utf-8"
    properties_header: Optional[str] = None


@dataclass
class LicenseConfig:
    """Configuration for the license header generator.

    Attributes:
        license_dir: Directory holding one subdirectory per dependency.
        exclude: Dependency names left out of the header.
        manifest_name: Manifest file inside each dependency directory.
        license_name: License text file inside each dependency directory.
        banner: Separator line written before every dependency.
    """
    license_dir: Path
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_LICENSE_EXCLUDES))
    manifest_name: str = "package.json"
    license_name: str = "license.txt"
    banner: str = LICENSE_BANNER

    def is_excluded(self, name: str) -> bool:
        """Check whether a dependency is on the exclusion list."""
        return name in self.exclude
