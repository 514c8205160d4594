import logging

import pytest

from docreport.logging.logger import Log


class TestLogConfigure:
    def test_sets_level(self) -> None:
        Log.configure("debug")
        assert Log._logger.level == logging.DEBUG
        Log.configure("INFO")

    def test_adds_single_handler(self) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(Log._logger.handlers) == 1


class TestLogMessages:
    def test_warning_is_emitted(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="docreport"):
            Log.warning("careful")
        assert "careful" in caplog.text

    def test_debug_hidden_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        Log.configure("INFO")
        Log.debug("hidden detail")
        assert "hidden detail" not in caplog.text
