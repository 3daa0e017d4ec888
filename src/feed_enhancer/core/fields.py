"""Title and description extraction from a single feed item."""

import re
from dataclasses import dataclass


TITLE_PATTERN = re.compile(r"<title>(.*?)</title>", re.IGNORECASE)
DESCRIPTION_PATTERN = re.compile(r"<description>(.*?)</description>", re.IGNORECASE)


@dataclass(frozen=True)
class FieldPair:
    """Lower-cased title and description of one item."""

    title: str = ""
    description: str = ""


def _first_capture(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    if not match:
        return ""
    return (match.group(1) or "").lower()


def extract_fields(item_text: str) -> FieldPair:
    """
    Extract the first title and description from an item's markup.

    Tags are matched case-insensitively and content is captured up to the
    first closing tag. Entities and CDATA sections are left as they are.

    Args:
        item_text: Raw markup of one item

    Returns:
        FieldPair with both values lower-cased, empty when the tag is missing
    """
    return FieldPair(
        title=_first_capture(TITLE_PATTERN, item_text),
        description=_first_capture(DESCRIPTION_PATTERN, item_text),
    )
