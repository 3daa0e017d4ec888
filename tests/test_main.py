import logging

from feed_enhancer.main import FeedEnhancerApp


def _file_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]


def test_previous_log_file_is_closed(tmp_path):
    FeedEnhancerApp(log_file=tmp_path / "first.log")
    first = _file_handlers()
    assert len(first) == 1

    FeedEnhancerApp(log_file=tmp_path / "second.log")
    assert first[0].stream is None
    handlers = _file_handlers()
    assert len(handlers) == 1
    assert handlers[0].baseFilename.endswith("second.log")
    handlers[0].close()


def test_unusable_config_is_logged_after_setup(tmp_path):
    log_file = tmp_path / "app.log"
    app = FeedEnhancerApp(tmp_path / "missing.yaml", log_file=log_file)

    assert app.feed_filter is None
    assert "No usable config in" in log_file.read_text(encoding="utf-8")
    _file_handlers()[0].close()


def test_blank_terms_in_config_build_no_filter(tmp_path):
    config = tmp_path / "conf.yaml"
    config.write_text("allowList: ['', '  ']\n", encoding="utf-8")
    app = FeedEnhancerApp(config)

    assert app.feed_filter is None
    assert app.get_info()["filtering"] is False
