"""CLI entry points for the localization build tools."""

import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .assets import create_img_tags as build_img_tags
from .config import ConverterConfig, LicenseConfig
from .errors import L10nError
from .licenses import generate_license_header as build_license_header
from .pipeline import (
    ConversionReport,
    PropertiesToJsonConverter,
    XmlToI18nConverter,
    XmlToPropertiesConverter,
)

verbose_option = click.option('--verbose', '-v', is_flag=True, help='Verbose output')

dir_argument = click.Path(exists=True, file_okay=False, path_type=Path)


def configure_logging(verbose: bool) -> None:
    """Set up stderr logging; ``verbose`` from the group or a command turns on DEBUG."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def fail(exc: Exception) -> None:
    click.secho(f"Error: {exc}", fg='red', err=True)
    raise SystemExit(1)


def report_files(report: ConversionReport) -> None:
    if not report.files_written:
        click.secho(f"No matching files in {report.source_dir}.", fg='yellow')
        return

    click.echo(f"Files written to {report.destination_dir}:")
    for path in report.files_written:
        click.secho(f"  {path.name}", fg='green')


@click.group()
@click.version_option(version=__version__)
@verbose_option
def cli(verbose: bool):
    """Localization and asset tools for the simulation build."""
    configure_logging(verbose)


@cli.command('properties-to-json')
@click.argument('source_dir', type=dir_argument)
@click.argument('dest_dir', type=click.Path(file_okay=False, path_type=Path))
@click.argument('key_filter', required=False)
@verbose_option
def properties_to_json(source_dir: Path, dest_dir: Path, key_filter: Optional[str], verbose: bool):
    """Convert .properties string files to JSON.

    SOURCE_DIR holds the *-strings*.properties files, DEST_DIR receives the
    JSON files. If KEY_FILTER is given, only keys containing it are written.
    """
    configure_logging(verbose)
    try:
        report = PropertiesToJsonConverter(ConverterConfig()).convert(source_dir, dest_dir, key_filter)
    except (L10nError, OSError) as exc:
        fail(exc)
    report_files(report)


@cli.command('xml-to-properties')
@click.argument('source_dir', type=dir_argument)
@click.argument('dest_dir', type=click.Path(file_okay=False, path_type=Path))
@verbose_option
def xml_to_properties(source_dir: Path, dest_dir: Path, verbose: bool):
    """Convert XML string translation files to .properties files."""
    configure_logging(verbose)
    try:
        report = XmlToPropertiesConverter(ConverterConfig()).convert(source_dir, dest_dir)
    except (L10nError, OSError) as exc:
        fail(exc)
    report_files(report)


@cli.command('xml-to-i18n')
@click.argument('source_dir', type=dir_argument)
@click.argument('dest_dir', type=click.Path(file_okay=False, path_type=Path))
@verbose_option
def xml_to_i18n(source_dir: Path, dest_dir: Path, verbose: bool):
    """Convert XML string translation files to JSON string files.

    The XML is converted to .properties in a temporary directory first.
    """
    configure_logging(verbose)
    try:
        report = XmlToI18nConverter(ConverterConfig()).convert(source_dir, dest_dir)
    except (L10nError, OSError) as exc:
        fail(exc)
    report_files(report)


@cli.command('create-img-tags')
@click.argument('directory', type=dir_argument)
@verbose_option
def create_img_tags(directory: Path, verbose: bool):
    """Print an <img> tag for every png, jpg and svg file in DIRECTORY."""
    configure_logging(verbose)
    try:
        tags = build_img_tags(directory)
    except OSError as exc:
        fail(exc)
    for tag in tags:
        click.echo(tag)


@cli.command('generate-license-header')
@click.argument('license_dir', type=dir_argument)
@verbose_option
def generate_license_header(license_dir: Path, verbose: bool):
    """Print the combined license text of the dependencies in LICENSE_DIR.

    Each subdirectory of LICENSE_DIR holds a package.json and a license.txt.
    """
    configure_logging(verbose)
    try:
        header = build_license_header(LicenseConfig(license_dir=license_dir))
    except (L10nError, OSError) as exc:
        fail(exc)
    click.echo(header)


if __name__ == '__main__':
    cli()
