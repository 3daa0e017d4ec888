"""Item boundary detection in feed documents."""

import re
from dataclasses import dataclass
from typing import List


# Non-greedy and flat: a nested <item> ends the outer span at the first </item>.
ITEM_PATTERN = re.compile(r"<item\b[^>]*>[\s\S]*?</item>", re.IGNORECASE)


@dataclass(frozen=True)
class ItemSpan:
    """One item element located in the original document."""

    text: str
    start: int
    end: int

    @property
    def key(self) -> tuple:
        return (self.start, self.end)


def locate_items(document: str) -> List[ItemSpan]:
    """
    Find all top-level item elements in a document.

    Args:
        document: Feed markup text

    Returns:
        Non-overlapping spans in document order, empty if there are no items
    """
    return [
        ItemSpan(text=match.group(0), start=match.start(), end=match.end())
        for match in ITEM_PATTERN.finditer(document)
    ]
