"""Tests for the timing decorator."""

import pytest

from cl_image_processor.utils.profiling import timed


def test_timed_logs_elapsed_time(log_messages: list[str]):
    @timed
    def work(value: int) -> int:
        return value * 2

    assert work(21) == 42
    assert len(log_messages) == 1
    assert log_messages[0].startswith("INFO [PROFILE] ")
    assert "work took" in log_messages[0]


def test_timed_logs_on_failure(log_messages: list[str]):
    @timed
    def explode() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()

    assert len(log_messages) == 1
    assert log_messages[0].startswith("INFO [PROFILE] ")


def test_timed_preserves_metadata():
    @timed
    def documented() -> None:
        """Docstring."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docstring."
