#!/usr/bin/env python3
"""
Tests for the console logger.
"""

import io

from SWARM_OPT.Logs import logger


def test_log_line_format_without_color():
    stream = io.StringIO()
    logger.log("hello swarm", "test_logger", "info", stream=stream)
    line = stream.getvalue()
    assert "[test_logger" in line
    assert line.rstrip().endswith("hello swarm")
    assert "\033[" not in line  # StringIO is not a terminal


class _TerminalStream(io.StringIO):
    def isatty(self):
        return True


def test_levels_are_colored_on_a_terminal():
    stream = _TerminalStream()
    logger.log("bad news", "test_logger", "error", stream=stream)
    logger.log("plain", "test_logger", "no-such-level", stream=stream)
    first, second = stream.getvalue().splitlines()
    assert logger.Colors.BOLD_RED + "bad news" + logger.Colors.RESET in first
    assert logger.Colors.RESET + "plain" in second


def test_debug_is_gated_by_configure(capsys):
    previous = logger.DEBUG
    try:
        logger.configure(debug=False)
        logger.log_debug("hidden", "test_logger")
        assert "hidden" not in capsys.readouterr().out

        logger.configure(debug=True)
        logger.log_debug("visible", "test_logger")
        assert "visible" in capsys.readouterr().out
    finally:
        logger.configure(debug=previous)


def test_level_helpers_write_to_stdout(capsys):
    logger.log_info("info line")
    logger.log_warning("warning line")
    logger.log_error("error line")
    out = capsys.readouterr().out
    assert "info line" in out and "warning line" in out and "error line" in out


if __name__ == "__main__":
    test_log_line_format_without_color()
