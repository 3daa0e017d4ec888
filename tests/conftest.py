"""Shared fixtures for Feed Enhancer tests."""

import logging

import pytest


FEED_WITH_SPONSORED = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Test Feed 1</title>
    <item>
      <title>Tech News</title>
      <description>Latest technology updates</description>
    </item>
    <item>
      <title>Sports News</title>
      <description>Latest sports updates</description>
    </item>
    <item>
      <title>Sponsored Content</title>
      <description>Advertisement</description>
    </item>
  </channel>
</rss>"""

FEED_WITH_TECHNOLOGY = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Test Feed 2</title>
    <item>
      <title>New Technology</title>
      <description>Information about new tech</description>
    </item>
    <item>
      <title>Weather Forecast</title>
      <description>Today's weather forecast</description>
    </item>
  </channel>
</rss>"""

NEGATION_FEED = """<rss><channel>
    <item>
      <title>Tech News Item 1</title>
      <description>This is a tech news item</description>
    </item>
    <item>
      <title>Non-Tech News Item</title>
      <description>This is not a tech news item</description>
    </item>
    <item>
      <title>Technology News Item</title>
      <description>Gadgets and more</description>
    </item>
</channel></rss>"""


@pytest.fixture
def feed_with_sponsored() -> str:
    return FEED_WITH_SPONSORED


@pytest.fixture
def feed_with_technology() -> str:
    return FEED_WITH_TECHNOLOGY


@pytest.fixture
def negation_feed() -> str:
    return NEGATION_FEED


@pytest.fixture
def feed_tree(tmp_path):
    """Input tree with two feeds, plain files and a nested directory."""
    input_dir = tmp_path / "input"
    (input_dir / "nested").mkdir(parents=True)
    (input_dir / "feed1.xml").write_text(FEED_WITH_SPONSORED, encoding="utf-8")
    (input_dir / "feed2.xml").write_text(FEED_WITH_TECHNOLOGY, encoding="utf-8")
    (input_dir / "file1.txt").write_text("This is file 1", encoding="utf-8")
    (input_dir / "nested" / "feed3.xml").write_text(FEED_WITH_SPONSORED, encoding="utf-8")
    (input_dir / "nested" / "image.bin").write_bytes(b"\x00\x01\xff<item>")
    return input_dir


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a config file and return its path."""
    def _write(text: str, name: str = "conf.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """FeedEnhancerApp replaces root handlers; put them back after each test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
