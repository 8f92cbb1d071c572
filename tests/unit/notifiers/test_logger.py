"""Tests for the logging progress notifier."""

import logging

import pytest

from bdd_runner.notifiers.logger import LoggingNotifierConfig, LoggingProgressNotifier


def test_logs_run_events(caplog: pytest.LogCaptureFixture) -> None:
    """Events are emitted as log records on the configured logger."""
    notifier = LoggingProgressNotifier.from_config(
        LoggingNotifierConfig(logger_name="bdd.test", level="WARNING")
    )

    with caplog.at_level(logging.WARNING, logger="bdd.test"):
        notifier.notify_feature_start("Login", "Users log in")
        notifier.notify_scenario_start("Successful login")
        notifier.notify_step_start("Step one", 1, 2)
        notifier.notify_scenario_finished("passed")

    assert [r.name for r in caplog.records] == ["bdd.test"] * 4
    assert all(r.levelno == logging.WARNING for r in caplog.records)
    assert [r.getMessage() for r in caplog.records] == [
        "Feature started: Login (Users log in)",
        "Scenario started: Successful login",
        "Step 1/2: Step one",
        "Scenario finished: passed",
    ]


def test_feature_without_description(caplog: pytest.LogCaptureFixture) -> None:
    """Feature start omits a missing description."""
    notifier = LoggingProgressNotifier(logging.getLogger("bdd.test"))

    with caplog.at_level(logging.INFO, logger="bdd.test"):
        notifier.notify_feature_start("Login", None)

    assert caplog.records[0].getMessage() == "Feature started: Login"
