"""Main Feed Enhancer application."""

import logging
from pathlib import Path
from typing import Dict, Optional

from .config import FilterConfig, load_config
from .core.filtering import FeedFilter, FilterResult
from .services.tree import FeedTreeProcessor
from .services.writer import OutputWriter


class FeedEnhancerApp:
    """Main Feed Enhancer application."""

    def __init__(self, config_file: Optional[Path] = None, log_file: Optional[Path] = None):
        """
        Initialize the Feed Enhancer application.

        Args:
            config_file: Optional path to configuration file
            log_file: Optional path to a log file in addition to the console
        """
        self.config_file = config_file
        self.log_file = log_file

        # Load configuration; None means no filtering
        self.config = load_config(config_file)

        # Setup logging
        self._setup_logging()

        # Config problems were logged before the handlers existed
        if config_file and self.config is None:
            logging.warning(f"No usable config in {config_file}, filtering disabled")

        # Initialize components
        self.writer = OutputWriter()
        self.feed_filter = self._build_filter(self.config)

        logging.info(
            "Feed Enhancer initialized (%s)",
            repr(self.feed_filter) if self.feed_filter else "no filtering",
        )

    @property
    def log_level(self) -> str:
        return self.config.log_level if self.config else "INFO"

    @property
    def feed_extensions(self):
        return self.config.feed_extensions if self.config else [".xml"]

    def _build_filter(self, config: Optional[FilterConfig]) -> Optional[FeedFilter]:
        """Create the feed filter, or None when the config has no terms."""
        if config is None or not config.has_filters:
            return None
        return FeedFilter(config.allow_list, config.block_list)

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        # Convert string log level to logging constant
        log_level = getattr(logging, self.log_level.upper(), logging.INFO)

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # Setup console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        # Configure root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.close()
        root_logger.handlers = []  # Clear existing handlers
        root_logger.addHandler(console_handler)

        # Setup file handler
        if self.log_file:
            Path(self.log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    def run(self, input_dir: Path, output_dir: Path, dry_run: bool = False, verbose: bool = False) -> int:
        """
        Filter every feed under input_dir into output_dir.

        Args:
            input_dir: Input directory tree
            output_dir: Output directory tree, created if missing
            dry_run: If True, show what would be done without writing
            verbose: If True, show detailed output

        Returns:
            Exit code (0 for success)
        """
        if verbose:
            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)
            for handler in root_logger.handlers:
                handler.setLevel(logging.DEBUG)

        logging.info(f"Starting Feed Enhancer (input={input_dir}, output={output_dir}, dry_run={dry_run})")

        if dry_run:
            logging.info("[DRY RUN MODE] No files will be written")

        try:
            processor = FeedTreeProcessor(
                feed_filter=self.feed_filter,
                feed_extensions=self.feed_extensions,
                writer=self.writer,
                dry_run=dry_run,
            )
            stats = processor.process(Path(input_dir), Path(output_dir))

            logging.info(
                f"Processing completed. Filtered {stats.feeds_filtered} feeds, "
                f"copied {stats.files_copied} files, dropped {stats.items_dropped} items."
            )
            logging.debug(f"Run stats: {stats.as_dict()}")
            return 0

        except KeyboardInterrupt:
            logging.info("Interrupted by user")
            return 0

        except Exception as e:
            logging.error(f"Application error: {e}")
            if verbose:
                logging.exception("Full traceback:")
            return 1

    def filter_file(self, path: Path) -> FilterResult:
        """
        Filter a single feed file and return the result.

        Args:
            path: Feed file path

        Returns:
            FilterResult; the unchanged document when no filtering is configured
        """
        content = self.writer.read_text(Path(path))
        if self.feed_filter is None:
            return FilterResult(content=content)

        result = self.feed_filter.apply(content)
        logging.info(f"Filtered {path}: kept {result.kept_items} of {result.total_items} items")
        return result

    def get_info(self) -> Dict:
        """
        Get application information.

        Returns:
            Dictionary with application info
        """
        from . import __version__

        return {
            "version": __version__,
            "config_file": str(self.config_file) if self.config_file else None,
            "filtering": self.feed_filter is not None,
            "allow_list": list(self.feed_filter.allow_list) if self.feed_filter else [],
            "block_list": list(self.feed_filter.block_list) if self.feed_filter else [],
            "feed_extensions": list(self.feed_extensions),
            "log_level": self.log_level,
        }
