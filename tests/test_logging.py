"""Tests for logging configuration and hooks."""

from __future__ import annotations

from typing import Any

import pytest

from klaw_variant import Err, MatchError, Nothing, Some, UnwrapError
from klaw_variant._logging import (
    add_log_hook,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture
def captured() -> list[dict[str, Any]]:
    """Configure DEBUG logging and capture every event through a hook."""
    received: list[dict[str, Any]] = []
    configure_logging(level="DEBUG", json_output=True)
    add_log_hook(received.append)
    return received


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, captured) -> None:
        logger = get_logger("test")
        logger.info("Test message", extra_field="extra_value")

        test_entries = [e for e in captured if e.get("event") == "Test message"]
        assert len(test_entries) == 1
        assert test_entries[0]["extra_field"] == "extra_value"
        assert test_entries[0]["level"] == "info"

    def test_multiple_hooks_all_called(self, captured) -> None:
        calls: list[str] = []
        add_log_hook(lambda _event: calls.append("second"))

        get_logger("test").info("Test")

        assert any(e.get("event") == "Test" for e in captured)
        assert calls == ["second"]

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append("called")

        configure_logging(level="DEBUG", json_output=True)
        add_log_hook(hook)
        logger = get_logger("test")
        logger.info("First")
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info("Second")
        assert len(calls) == 1

    def test_failing_hook_does_not_break_logging(self, captured) -> None:
        def broken(_event: dict[str, Any]) -> None:
            raise ValueError("hook failure")

        add_log_hook(broken)
        get_logger("test").info("Still logged")

        assert any(e.get("event") == "Still logged" for e in captured)

    def test_level_filtering(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level="WARNING", json_output=True)
        add_log_hook(received.append)

        get_logger("test").debug("Hidden")
        get_logger("test").warning("Shown")

        events = [e.get("event") for e in received]
        assert "Hidden" not in events
        assert "Shown" in events


class TestFailureEvents:
    """Failure paths emit debug events before raising."""

    def test_unwrap_failure_logged(self, captured) -> None:
        with pytest.raises(UnwrapError):
            Nothing.unwrap()
        with pytest.raises(UnwrapError):
            Err("e").expect("nope")

        failures = [e for e in captured if e.get("event") == "unwrap.failed"]
        assert [(e["variant"], e["method"]) for e in failures] == [
            ("Nothing", "unwrap"),
            ("Err", "expect"),
        ]

    def test_match_failures_logged(self, captured) -> None:
        with pytest.raises(MatchError):
            Some(1).match([])
        with pytest.raises(MatchError):
            Some(1).match([(Some(2), "two")])

        events = {e.get("event"): e for e in captured}
        assert events["match.no_arms"]["variant"] == "Some"
        assert events["match.non_exhaustive"]["arms"] == 1

    def test_successful_match_is_silent(self, captured) -> None:
        assert Some(1).match([(Some(1), "one")]) == "one"
        assert not [e for e in captured if str(e.get("event", "")).startswith("match.")]
