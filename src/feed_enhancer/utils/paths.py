"""Path utilities for Feed Enhancer."""

from pathlib import Path
from typing import Iterable, Iterator


def is_feed_file(path: Path, extensions: Iterable[str]) -> bool:
    """
    Check whether a file should be treated as a feed document.

    Args:
        path: File path
        extensions: Lower-cased extensions with a leading dot

    Returns:
        True if the file's suffix matches one of the extensions
    """
    return path.suffix.lower() in set(extensions)


def ensure_dir(path: Path) -> Path:
    """
    Ensure a directory exists and return its path.

    Args:
        path: Directory path

    Returns:
        The same path
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def iter_sorted(directory: Path) -> Iterator[Path]:
    """Yield directory entries in name order."""
    yield from sorted(directory.iterdir(), key=lambda p: p.name)
