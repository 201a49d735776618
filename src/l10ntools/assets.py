"""HTML image tags for a directory of image assets."""

import os
from pathlib import Path

from .config import IMAGE_EXTENSIONS


def is_image(name: str) -> bool:
    """Check whether a file name has a png, jpg or svg extension, ignoring case."""
    return name.lower().endswith(tuple(f".{ext}" for ext in IMAGE_EXTENSIONS))


def find_images(directory: Path) -> list[str]:
    """List image file names in a directory, not recursing.

    Names come back in directory listing order.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(directory) as entries:
        return [entry.name for entry in entries if entry.is_file() and is_image(entry.name)]


def img_tag(name: str) -> str:
    return f'<img src="images/{name}"/>'


def create_img_tags(directory: Path) -> list[str]:
    """Build one ``<img>`` tag per image in ``directory``."""
    return [img_tag(name) for name in find_images(directory)]
