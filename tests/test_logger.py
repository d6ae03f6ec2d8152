"""Tests for the coloured log formatter."""
import logging

from sitepush.utils.logger import ColouredFormatter, get_logger


def make_record(level=logging.ERROR, msg="Upload failed", **extra):
    record = logging.LogRecord("sitepush.test", level, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_formatter_tags_level():
    line = ColouredFormatter("%(message)s").format(make_record())
    assert "[ERROR]" in line
    assert "Upload failed" in line
    assert "key:" not in line


def test_formatter_appends_object_key():
    line = ColouredFormatter("%(message)s").format(make_record(key="blog/index.html"))
    assert "Upload failed" in line
    assert "(key: blog/index.html)" in line


def test_get_logger_uses_sitepush_namespace():
    assert get_logger("services.executor").name == "sitepush.services.executor"
    assert get_logger("sitepush.cli").name == "sitepush.cli"
