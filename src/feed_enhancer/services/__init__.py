"""Service layer for Feed Enhancer."""

from .tree import FeedTreeProcessor, TreeStats
from .writer import OutputWriter

__all__ = ["FeedTreeProcessor", "TreeStats", "OutputWriter"]
