"""Directory tree processing: filter feed files, copy everything else."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..core.filtering import FeedFilter, FilterResult
from ..utils.paths import ensure_dir, is_feed_file, iter_sorted
from .writer import OutputWriter


logger = logging.getLogger(__name__)


@dataclass
class TreeStats:
    """Counters collected while processing a tree."""

    feeds_filtered: int = 0
    files_copied: int = 0
    directories: int = 0
    items_total: int = 0
    items_dropped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


class FeedTreeProcessor:
    """Mirrors an input directory into an output directory, filtering feeds."""

    def __init__(
        self,
        feed_filter: Optional[FeedFilter] = None,
        feed_extensions: Iterable[str] = (".xml",),
        writer: Optional[OutputWriter] = None,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the tree processor.

        Args:
            feed_filter: Filter applied to feed files, None copies them verbatim
            feed_extensions: Extensions identifying feed files
            writer: Output writer (default: utf-8 OutputWriter)
            dry_run: If True, decide everything but write nothing
        """
        self.feed_filter = feed_filter
        self.feed_extensions = [ext.lower() for ext in feed_extensions]
        self.writer = writer or OutputWriter()
        self.dry_run = dry_run

    def process(self, input_dir: Path, output_dir: Path) -> TreeStats:
        """
        Process every file below input_dir into output_dir.

        Args:
            input_dir: Root of the input tree
            output_dir: Root of the output tree, created if missing

        Returns:
            TreeStats for the run

        Raises:
            FileNotFoundError: If input_dir does not exist
            NotADirectoryError: If input_dir is not a directory
            ValueError: If input and output are the same directory
        """
        input_dir = Path(input_dir)
        output_dir = Path(output_dir)

        if not input_dir.exists():
            raise FileNotFoundError(f"Input directory not found: {input_dir}")
        if not input_dir.is_dir():
            raise NotADirectoryError(f"Input path is not a directory: {input_dir}")
        if input_dir.resolve() == output_dir.resolve():
            raise ValueError("Input and output directories must differ")

        if not self.dry_run:
            ensure_dir(output_dir)

        stats = TreeStats()
        self._process_directory(input_dir, output_dir, output_dir.resolve(), stats)

        logger.info(
            "Processed %s: %d feeds filtered, %d files copied, %d of %d items dropped",
            input_dir,
            stats.feeds_filtered,
            stats.files_copied,
            stats.items_dropped,
            stats.items_total,
        )
        return stats

    def _process_directory(self, src: Path, dest: Path, output_root: Path, stats: TreeStats) -> None:
        for entry in iter_sorted(src):
            dest_path = dest / entry.name

            if entry.is_dir():
                # An output tree nested in the input tree is not walked
                if entry.resolve() == output_root:
                    logger.debug(f"Skipping output directory inside input: {entry}")
                    continue
                if not self.dry_run:
                    ensure_dir(dest_path)
                stats.directories += 1
                self._process_directory(entry, dest_path, output_root, stats)
            else:
                self.process_file(entry, dest_path, stats)

    def process_file(self, src: Path, dest: Path, stats: Optional[TreeStats] = None) -> None:
        """
        Filter a feed file or copy any other file to dest.

        Args:
            src: Source file
            dest: Destination file
            stats: Optional counters to update
        """
        stats = stats if stats is not None else TreeStats()

        if not is_feed_file(src, self.feed_extensions) or self.feed_filter is None:
            self._copy(src, dest, stats)
            return

        try:
            content = self.writer.read_text(src)
        except UnicodeDecodeError as e:
            logger.warning(f"Cannot decode {src}, copying verbatim: {e}")
            self._copy(src, dest, stats)
            return

        result = self.feed_filter.apply(content)
        self._record(src, result, stats)

        if not self.dry_run:
            self.writer.write_text(dest, result.content)

    def _copy(self, src: Path, dest: Path, stats: TreeStats) -> None:
        logger.debug(f"Copying {src} -> {dest}")
        if not self.dry_run:
            self.writer.copy_file(src, dest)
        stats.files_copied += 1

    def _record(self, src: Path, result: FilterResult, stats: TreeStats) -> None:
        stats.feeds_filtered += 1
        stats.items_total += result.total_items
        stats.items_dropped += result.dropped_items
        prefix = "[DRY RUN] " if self.dry_run else ""
        logger.info(
            "%sFiltered %s: kept %d of %d items",
            prefix,
            src,
            result.kept_items,
            result.total_items,
        )
