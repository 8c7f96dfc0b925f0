"""
Tests for the category logger: routing, filtering and detail formatting
"""

from utils.logger import get_logger, get_category_logger, configure_logger, Logger
from models.enums import LogLevel, LogCategory


def test_info_goes_to_stdout(capsys):
    get_logger().info(LogCategory.SYSTEM, "Application started")

    captured = capsys.readouterr()
    assert "SYSTEM" in captured.out
    assert "Application started" in captured.out
    assert captured.err == ""


def test_warn_and_error_go_to_stderr(capsys):
    log = get_category_logger(LogCategory.NOTIFY)

    log.warn("Notification failed")
    log.error("Event loop terminated")

    captured = capsys.readouterr()
    assert "Notification failed" in captured.err
    assert "Event loop terminated" in captured.err
    assert captured.out == ""


def test_details_are_printed_as_tree(capsys):
    get_logger().for_category(LogCategory.LED).info("LED write failed", path="/x", error="EPERM")

    lines = capsys.readouterr().out.splitlines()
    assert lines[1].strip() == "├─ path: /x"
    assert lines[2].strip() == "└─ error: EPERM"


def test_min_level_filters(capsys):
    configure_logger(LogLevel.WARN, use_colors=False)

    log = get_category_logger(LogCategory.BUTTON)
    log.debug("hidden")
    log.info("hidden too")
    log.warn("shown")

    captured = capsys.readouterr()
    assert "hidden" not in captured.out + captured.err
    assert "shown" in captured.err


def test_configure_keeps_singleton():
    before = get_logger()

    configure_logger(LogLevel.ERROR, use_colors=False)

    assert get_logger() is before
    assert before.min_level == LogLevel.ERROR


def test_colors_wrap_message(capsys):
    Logger(use_colors=True).info(LogCategory.CONFIG, "colored")

    assert "\033[" in capsys.readouterr().out


def test_bound_logger_category_override(capsys):
    get_category_logger(LogCategory.BUTTON).log("moved", category=LogCategory.LIFECYCLE)

    out = capsys.readouterr().out
    assert "LIFECYCLE" in out
    assert "BUTTON" not in out
