"""Discover gallery image files in a directory."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryScanError(Exception):
    """Exception raised when the gallery directory cannot be listed."""

    pass


def file_extension(filename: str) -> str | None:
    """Return the lower-cased extension of ``filename`` without the dot.

    Dot-files like ``.jpg`` and names without a dot have no extension.
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem or not ext:
        return None
    return ext.lower()


def _is_utf8(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def discover_files(directory: str | Path, extensions: Iterable[str]) -> list[str]:
    """List regular files in ``directory`` whose extension is in ``extensions``.

    Extensions are compared case-insensitively and must match exactly. Entries
    that cannot be inspected are skipped with a warning. The result is sorted
    by filename so it does not depend on the platform's listing order.

    Raises:
        DirectoryScanError: The directory itself could not be opened.
    """
    directory = Path(directory)
    wanted = {ext.strip().lower() for ext in extensions}
    filenames: list[str] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as e:
                    logger.warning(f"Error getting file type for {entry.path!r}: {e}")
                    continue

                if not is_file:
                    continue

                if not _is_utf8(entry.name):
                    logger.warning(f"{entry.path!r} is not UTF-8, skipping")
                    continue

                ext = file_extension(entry.name)
                if ext is not None and ext in wanted:
                    filenames.append(entry.name)
    except OSError as e:
        raise DirectoryScanError(f"Unable to read directory {directory}: {e}") from e

    filenames.sort()
    logger.debug(f"Discovered {len(filenames)} image file(s) in {directory}")
    return filenames
