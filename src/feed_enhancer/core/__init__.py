"""Core feed filtering functionality."""

from .fields import FieldPair, extract_fields
from .filtering import FeedFilter, FilterResult, filter_feed_document, remove_items, should_include_item
from .items import ItemSpan, locate_items
from .matching import matches_allow_list, matches_allow_term, matches_block_list, matches_block_term

__all__ = [
    "FieldPair",
    "extract_fields",
    "FeedFilter",
    "FilterResult",
    "filter_feed_document",
    "remove_items",
    "should_include_item",
    "ItemSpan",
    "locate_items",
    "matches_allow_list",
    "matches_allow_term",
    "matches_block_list",
    "matches_block_term",
]
