"""Tests for logging decorators."""

import logging

import pytest

from step_align.utils import timed, logged, get_logger


class TestTimed:
    def test_returns_result_and_logs(self, caplog):
        @timed
        def add(a, b):
            return a + b

        with caplog.at_level(logging.INFO, logger="step_align.utils.decorators"):
            assert add(2, 3) == 5

        assert "add completed in" in caplog.text


class TestLogged:
    def test_logs_and_reraises_failure(self, caplog):
        @logged
        def explode():
            raise ValueError("boom")

        with caplog.at_level(logging.DEBUG, logger="step_align.utils.decorators"):
            with pytest.raises(ValueError):
                explode()

        assert "explode failed: boom" in caplog.text

    def test_preserves_metadata(self):
        @logged
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


def test_get_logger_uses_name():
    assert get_logger("step_align.test").name == "step_align.test"
