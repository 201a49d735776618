"""Aggregation of third-party license texts into a single header."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .config import LICENSE_BANNER, LicenseConfig
from .errors import ParseError

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a text file as UTF-8, falling back to ISO-8859-1 for legacy files."""
    raw = Path(path).read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("iso-8859-1")


@dataclass
class Manifest:
    """License fields read from a dependency's package.json.

    Attributes:
        license: License type, upper-cased.
        production: Whether the dependency ships in built simulations.
    """
    license: str
    production: bool

    @classmethod
    def parse(cls, content: str) -> "Manifest":
        """Parse manifest JSON.

        Raises:
            ParseError: If the JSON is invalid or a field is missing or mistyped.
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid manifest JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ParseError("Manifest is not a JSON object")

        license_type = data.get("license")
        if not isinstance(license_type, str):
            raise ParseError("Manifest field 'license' is missing or not a string")

        production = data.get("production")
        if not isinstance(production, bool):
            raise ParseError("Manifest field 'production' is missing or not a boolean")

        return cls(license=license_type.strip().upper(), production=production)

    @classmethod
    def from_file(cls, path: Path) -> "Manifest":
        try:
            return cls.parse(read_text(path))
        except ParseError as exc:
            raise ParseError(str(exc), path) from exc


@dataclass
class LicenseEntry:
    """A dependency that appears in built simulations.

    Attributes:
        name: Dependency directory name.
        license_type: License type from the manifest.
        text: Raw license text.
    """
    name: str
    license_type: str
    text: str


def collect_licenses(config: LicenseConfig) -> list[LicenseEntry]:
    """Read every production dependency of the license directory.

    Dependencies are visited in name order. Excluded or non-production
    dependencies are skipped.

    Raises:
        OSError: If the directory, a manifest or a license text cannot be read.
        ParseError: If a manifest is malformed.
    """
    entries = []
    for directory in sorted(p for p in Path(config.license_dir).iterdir() if p.is_dir()):
        manifest = Manifest.from_file(directory / config.manifest_name)
        if not manifest.production or config.is_excluded(directory.name):
            logger.debug("Skipping %s", directory.name)
            continue

        logger.info("%s, LICENSE = %s", directory.name, manifest.license)
        text = read_text(directory / config.license_name)
        entries.append(LicenseEntry(directory.name, manifest.license, text))

    return entries


def format_license_header(entries: list[LicenseEntry], banner: str = LICENSE_BANNER) -> str:
    """Concatenate license entries, each introduced by the banner line."""
    parts = []
    for entry in entries:
        parts.append(f"\n{banner}\n{entry.name}: {entry.license_type}\n{entry.text}\n")
    return "".join(parts).strip()


def generate_license_header(config: LicenseConfig) -> str:
    """Build the license header for the dependencies in ``config.license_dir``."""
    return format_license_header(collect_licenses(config), config.banner)
