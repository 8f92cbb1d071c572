"""Progress notifier printing run events to the console."""

import sys
from typing import Literal, TextIO

from bdd_runner.models.base import Model
from bdd_runner.models.result import ResultStatus
from bdd_runner.notifiers.base import ProgressNotifier
from bdd_runner.notifiers.manifest import NotifierManifest


class ConsoleNotifierConfig(Model):
    """Configuration for the console notifier."""

    stream: Literal["stdout", "stderr"] = "stdout"


class ConsoleProgressNotifier(ProgressNotifier):
    """Writes one line per event to a text stream.

    Without an explicit stream, ``sys.stdout`` is looked up on every write so
    output redirection set up after construction is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @classmethod
    def from_config(cls, config: ConsoleNotifierConfig) -> "ConsoleProgressNotifier":
        if config.stream == "stderr":
            return cls(sys.stderr)
        return cls()

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def notify_feature_start(self, name: str, description: str | None) -> None:
        self._write(f"FEATURE: {name}")
        if description:
            self._write(f"  {description}")

    def notify_scenario_start(self, name: str) -> None:
        self._write(f"SCENARIO: {name}")

    def notify_step_start(self, name: str, number: int, total: int) -> None:
        self._write(f"  STEP {number}/{total}: {name}...")

    def notify_scenario_finished(self, status: ResultStatus) -> None:
        self._write(f"  SCENARIO RESULT: {status}")


console_manifest = NotifierManifest(
    config_cls=ConsoleNotifierConfig,
    notifier_factory=ConsoleProgressNotifier.from_config,
)
