from __future__ import annotations

import io
import logging
import threading
from typing import Generator
from unittest.mock import MagicMock

import pytest

from upgradepath.utils.logger import (
    ColoredFormatter,
    get_logger,
    level_for_verbosity,
    setup_logging,
    stream_supports_color,
)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the upgradepath logger around a test."""
    root_logger = logging.getLogger("upgradepath")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


@pytest.fixture
def captured_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CI", raising=False)


def _record(level: int = logging.INFO, msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="upgradepath.core.resolver",
        level=level,
        pathname="resolver.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def _tty(is_tty: bool = True) -> MagicMock:
    stream = MagicMock()
    stream.isatty.return_value = is_tty
    return stream


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_colors_level_name(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        result = formatter.format(_record())

        assert result == (
            f"{ColoredFormatter.COLORS['INFO']}INFO{ColoredFormatter.RESET}: Test message"
        )

    def test_plain_when_disabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record(logging.WARNING, "fallback")) == (
            "WARNING: fallback"
        )

    def test_unknown_level_is_plain(self) -> None:
        formatter = ColoredFormatter("%(levelname)s")
        record = _record()
        record.levelname = "TRACE"

        assert formatter.format(record) == "TRACE"

    def test_original_record_untouched(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")
        record = _record(logging.ERROR)

        formatter.format(record)

        assert record.levelname == "ERROR"


@pytest.mark.unit
class TestStreamSupportsColor:
    """Tests for stream_supports_color."""

    def test_terminal(self, color_env: None) -> None:
        assert stream_supports_color(_tty()) is True

    def test_not_a_terminal(self, color_env: None) -> None:
        assert stream_supports_color(io.StringIO()) is False

    def test_no_color_env(self, color_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert stream_supports_color(_tty()) is False

    def test_ci_env(self, color_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CI", "true")

        assert stream_supports_color(_tty()) is False

    def test_isatty_raises(self, color_env: None) -> None:
        stream = MagicMock()
        stream.isatty.side_effect = ValueError("I/O operation on closed file")

        assert stream_supports_color(stream) is False


@pytest.mark.unit
@pytest.mark.parametrize(
    "verbose, level",
    [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (4, logging.DEBUG)],
)
def test_level_for_verbosity(verbose: int, level: int) -> None:
    assert level_for_verbosity(verbose) == level


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_config(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        setup_logging(stream=captured_stream)

        logger = logging.getLogger("upgradepath")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.propagate is False

    def test_plain_output_to_non_terminal(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        setup_logging(stream=captured_stream)

        get_logger("core.resolver").warning("no next minor")

        assert captured_stream.getvalue() == "WARNING: no next minor\n"

    def test_verbose_format(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        setup_logging(verbose=True, stream=captured_stream)

        get_logger("core.resolver").info("fallback")

        assert " - upgradepath.core.resolver - INFO - fallback" in captured_stream.getvalue()

    def test_replaces_previous_handler(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=captured_stream)

        handlers = logging.getLogger("upgradepath").handlers
        assert len(handlers) == 1
        assert handlers[0].stream is captured_stream

    def test_filters_below_level(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        setup_logging(level=logging.INFO, stream=captured_stream)
        logger = get_logger("core.resolver")

        logger.debug("hidden")
        logger.info("shown")

        output = captured_stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output

    def test_thread_safe(self, clean_logger_state: None) -> None:
        threads = [
            threading.Thread(target=setup_logging, kwargs={"stream": io.StringIO()})
            for _ in range(10)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(logging.getLogger("upgradepath").handlers) == 1


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize("name", [None, "", "upgradepath"])
    def test_root_logger(self, clean_logger_state: None, name: str) -> None:
        assert get_logger(name).name == "upgradepath"

    def test_relative_name(self, clean_logger_state: None) -> None:
        assert get_logger("core.qualifier").name == "upgradepath.core.qualifier"

    def test_qualified_name(self, clean_logger_state: None) -> None:
        assert get_logger("upgradepath.cli").name == "upgradepath.cli"

    def test_similar_prefix_is_nested(self, clean_logger_state: None) -> None:
        assert get_logger("upgradepathx").name == "upgradepath.upgradepathx"

    def test_adds_null_handler_when_unconfigured(self, clean_logger_state: None) -> None:
        logger = get_logger("isolated.module")

        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_same_instance_for_same_name(self, clean_logger_state: None) -> None:
        assert get_logger("cli") is get_logger("upgradepath.cli")
