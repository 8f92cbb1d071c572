"""Abstract base for progress notifiers."""

from abc import ABC, abstractmethod

from bdd_runner.models.result import ResultStatus


class ProgressNotifier(ABC):
    """Receives lifecycle events of a run for live reporting.

    Calls happen on the thread running the scenarios, in order: one feature
    start, then for each scenario a scenario start, one step start per
    attempted step and a single scenario finished event.
    """

    @abstractmethod
    def notify_feature_start(self, name: str, description: str | None) -> None:
        """Called once when the runner for a feature is created."""

    @abstractmethod
    def notify_scenario_start(self, name: str) -> None:
        """Called before any step of a scenario is prepared."""

    @abstractmethod
    def notify_step_start(self, name: str, number: int, total: int) -> None:
        """Called right before a step is executed.

        Args:
            name: Human-readable step name
            number: 1-based position of the step in its scenario
            total: Number of steps submitted for the scenario

        """

    @abstractmethod
    def notify_scenario_finished(self, status: ResultStatus) -> None:
        """Called once per scenario, whether or not a step failed."""
