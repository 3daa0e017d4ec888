"""Allow-list and block-list term matching."""

import re
from functools import lru_cache
from typing import List, Optional, Sequence

from .fields import FieldPair, extract_fields


@lru_cache(maxsize=256)
def _whole_word_pattern(term: str) -> re.Pattern:
    """Compile a case-insensitive whole-word pattern for an escaped term."""
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def usable_terms(terms: Optional[Sequence[str]]) -> List[str]:
    """Drop blank terms; a list of only blanks behaves like no list."""
    return [term for term in terms or [] if term.strip()]


def _matches_whole_word(term: str, fields: FieldPair) -> bool:
    if not term:
        return False
    pattern = _whole_word_pattern(term)
    return bool(pattern.search(fields.title) or pattern.search(fields.description))


def matches_allow_term(term: str, fields: FieldPair) -> bool:
    """
    Check a single allow-list term against an item's fields.

    A title containing "non-<term>" negates the topic for this item, even if
    the term occurs elsewhere.

    Args:
        term: Term to look for (case-insensitive)
        fields: Lower-cased title and description

    Returns:
        True if the term matches as a whole word and is not negated
    """
    lower_term = term.lower()
    if lower_term and f"non-{lower_term}" in fields.title:
        return False
    return _matches_whole_word(lower_term, fields)


def matches_block_term(term: str, fields: FieldPair) -> bool:
    """Check a single block-list term; no "non-" exclusion applies."""
    return _matches_whole_word(term.lower(), fields)


def matches_allow_list(item_text: str, allow_list: Optional[Sequence[str]]) -> bool:
    """
    Check whether an item satisfies the allow-list.

    Args:
        item_text: Raw markup of one item
        allow_list: Allow-list terms, None or empty allows everything

    Returns:
        True if the list is empty or any term matches
    """
    terms = usable_terms(allow_list)
    if not terms:
        return True

    fields = extract_fields(item_text)
    return any(matches_allow_term(term, fields) for term in terms)


def matches_block_list(item_text: str, block_list: Optional[Sequence[str]]) -> bool:
    """
    Check whether an item hits the block-list.

    Args:
        item_text: Raw markup of one item
        block_list: Block-list terms, None or empty blocks nothing

    Returns:
        True if any term matches
    """
    terms = usable_terms(block_list)
    if not terms:
        return False

    fields = extract_fields(item_text)
    return any(matches_block_term(term, fields) for term in terms)
