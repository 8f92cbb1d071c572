"""Tests for the console progress notifier."""

import io

import pytest

from bdd_runner.notifiers.console import ConsoleNotifierConfig, ConsoleProgressNotifier


def test_writes_run_events() -> None:
    """Each event becomes one line on the stream."""
    stream = io.StringIO()
    notifier = ConsoleProgressNotifier(stream)

    notifier.notify_feature_start("Login", "Users log in")
    notifier.notify_scenario_start("Successful login")
    notifier.notify_step_start("Given user is about to login", 1, 2)
    notifier.notify_step_start("Then login is successful", 2, 2)
    notifier.notify_scenario_finished("passed")

    assert stream.getvalue().splitlines() == [
        "FEATURE: Login",
        "  Users log in",
        "SCENARIO: Successful login",
        "  STEP 1/2: Given user is about to login...",
        "  STEP 2/2: Then login is successful...",
        "  SCENARIO RESULT: passed",
    ]


def test_feature_without_description() -> None:
    """No description line is written when there is none."""
    stream = io.StringIO()

    ConsoleProgressNotifier(stream).notify_feature_start("Login", None)

    assert stream.getvalue() == "FEATURE: Login\n"


def test_defaults_to_current_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Without a stream the notifier writes to stdout."""
    notifier = ConsoleProgressNotifier()

    notifier.notify_scenario_start("Captured")

    assert capsys.readouterr().out == "SCENARIO: Captured\n"


def test_from_config_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Configured stderr stream is used."""
    notifier = ConsoleProgressNotifier.from_config(
        ConsoleNotifierConfig(stream="stderr")
    )

    notifier.notify_scenario_finished("failed")

    captured = capsys.readouterr()
    assert captured.err == "  SCENARIO RESULT: failed\n"
    assert captured.out == ""
