"""Tests for message formatting helpers and the console log formatter."""

import logging
from io import StringIO
from unittest.mock import patch

import pytest

from discord_video_queue.utils.logging import ColoredFormatter
from discord_video_queue.utils.reply import format_duration, plural_suffix, truncate


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(None, "–"), (0, "0:00"), (59, "0:59"), (61, "1:01"), (3600, "1:00:00"), (90.9, "1:30")],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected


class TestTruncate:
    def test_short_text_untouched(self):
        assert truncate("short") == "short"

    def test_long_text_gets_ellipsis(self):
        result = truncate("a" * 100, 10)

        assert result == "a" * 9 + "…"
        assert len(result) == 10


class TestPluralSuffix:
    def test_plural(self):
        assert plural_suffix(1) == ""
        assert plural_suffix(0) == "s"
        assert plural_suffix(3) == "s"


def _record(level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("discord_video_queue.test", level, "x.py", 1, "hello", (), None)


class TestColoredFormatter:
    def _tty(self) -> StringIO:
        stream = StringIO()
        stream.isatty = lambda: True  # type: ignore[method-assign]
        return stream

    def test_colors_level_and_dims_name_on_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s %(name)s %(message)s", stream=self._tty())

        output = fmt.format(_record(logging.ERROR))

        assert "\033[31mERROR\033[0m" in output
        assert "\033[2mdiscord_video_queue.test\033[0m" in output

    def test_original_record_untouched(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s", stream=self._tty())
        record = _record()

        fmt.format(record)

        assert record.levelname == "INFO"

    def test_plain_when_not_tty(self):
        fmt = ColoredFormatter("%(levelname)s %(message)s", stream=StringIO())

        assert fmt.format(_record()) == "INFO hello"

    def test_plain_when_no_color_set(self):
        fmt = ColoredFormatter("%(levelname)s %(message)s", stream=self._tty())

        with patch.dict("os.environ", {"NO_COLOR": "1"}):
            assert fmt.format(_record()) == "INFO hello"
