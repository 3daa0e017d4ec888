"""Per-item keep/drop decisions and document rebuilding."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .fields import extract_fields
from .items import ItemSpan, locate_items
from .matching import matches_allow_list, matches_block_list, usable_terms


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterResult:
    """Outcome of filtering one document."""

    content: str
    total_items: int = 0
    kept_items: int = 0

    @property
    def dropped_items(self) -> int:
        return self.total_items - self.kept_items


def should_include_item(
    item_text: str,
    allow_list: Optional[Sequence[str]],
    block_list: Optional[Sequence[str]],
) -> bool:
    """Keep an item when it satisfies the allow-list and misses the block-list."""
    return matches_allow_list(item_text, allow_list) and not matches_block_list(item_text, block_list)


def remove_items(document: str, spans: Sequence[ItemSpan], kept: Iterable[ItemSpan]) -> str:
    """
    Splice every span that is not kept out of the document.

    Spans are removed from the highest start offset down, so the offsets of
    the remaining spans stay valid. Text between items is left untouched.

    Args:
        document: Original document text
        spans: All spans located in the document
        kept: Subset of spans to keep

    Returns:
        New document text without the dropped spans
    """
    kept_keys = {span.key for span in kept}
    result = document

    for span in sorted(spans, key=lambda s: s.start, reverse=True):
        if span.key not in kept_keys:
            result = result[:span.start] + result[span.end:]

    return result


class FeedFilter:
    """Applies an allow-list and a block-list to feed documents."""

    def __init__(
        self,
        allow_list: Optional[Sequence[str]] = None,
        block_list: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Initialize the filter.

        Args:
            allow_list: Terms of which at least one must match, None allows all
            block_list: Terms of which none may match, None blocks nothing
        """
        self.allow_list: List[str] = usable_terms(allow_list)
        self.block_list: List[str] = usable_terms(block_list)

    @property
    def enabled(self) -> bool:
        """Whether any filtering would happen at all."""
        return bool(self.allow_list or self.block_list)

    def decide(self, span: ItemSpan) -> bool:
        """Return True to keep the item, False to drop it."""
        keep = should_include_item(span.text, self.allow_list, self.block_list)
        if not keep and logger.isEnabledFor(logging.DEBUG):
            fields = extract_fields(span.text)
            logger.debug("Dropping item at %d-%d: %r", span.start, span.end, fields.title)
        return keep

    def apply(self, document: str) -> FilterResult:
        """
        Filter a document.

        Args:
            document: Feed markup text

        Returns:
            FilterResult with the rebuilt document and item counts
        """
        if not self.enabled:
            return FilterResult(content=document)

        spans = locate_items(document)
        kept = [span for span in spans if self.decide(span)]

        if len(kept) == len(spans):
            return FilterResult(content=document, total_items=len(spans), kept_items=len(kept))

        return FilterResult(
            content=remove_items(document, spans, kept),
            total_items=len(spans),
            kept_items=len(kept),
        )

    def __repr__(self) -> str:
        return f"FeedFilter(allow_list={self.allow_list!r}, block_list={self.block_list!r})"


def filter_feed_document(
    document: str,
    allow_list: Optional[Sequence[str]],
    block_list: Optional[Sequence[str]],
) -> str:
    """
    Filter a feed document by allow-list and block-list.

    When neither list has terms the document is returned unchanged without
    being scanned.

    Args:
        document: Feed markup text
        allow_list: Allow-list terms or None
        block_list: Block-list terms or None

    Returns:
        Document text containing only the surviving items
    """
    return FeedFilter(allow_list, block_list).apply(document).content
