"""Utility functions for Feed Enhancer."""

from .paths import (
    ensure_dir,
    is_feed_file,
    iter_sorted
)

__all__ = [
    "ensure_dir",
    "is_feed_file",
    "iter_sorted"
]
