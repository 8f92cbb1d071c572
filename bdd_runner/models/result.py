"""Models for feature, scenario and step execution results.

The tree is owned by a single runner: a feature holds its scenarios and each
scenario holds its steps. Parent statuses are always computed from children.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

ResultStatus = Literal["passed", "failed", "not-run"]


def rollup_status(statuses: Iterable[ResultStatus]) -> ResultStatus:
    """Derive a parent status from the statuses of its children.

    Any failure wins, then anything not run; an empty collection is passed.
    """
    collected = set(statuses)
    if "failed" in collected:
        return "failed"
    if "not-run" in collected:
        return "not-run"
    return "passed"


@dataclass(frozen=True, kw_only=True)
class StepFailure:
    """Details of the exception raised by a failed step."""

    exception_type: str
    message: str
    traceback: str = field(default="", repr=False)


@dataclass(frozen=True, kw_only=True)
class StepResult:
    """Outcome of a single step."""

    name: str
    number: int
    status: ResultStatus = "not-run"
    failure: StepFailure | None = None


@dataclass(frozen=True, kw_only=True)
class ScenarioResult:
    """Outcome of a scenario, built once all its steps were attempted."""

    name: str
    steps: Sequence[StepResult] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def status(self) -> ResultStatus:
        return rollup_status(step.status for step in self.steps)


@dataclass(frozen=True, kw_only=True)
class FeatureResult:
    """Outcome of a feature: the scenarios run for one test class.

    Name and description are fixed at construction; scenarios may only be
    appended.
    """

    name: str
    description: str | None = None
    _scenarios: list[ScenarioResult] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def scenarios(self) -> Sequence[ScenarioResult]:
        return tuple(self._scenarios)

    @property
    def status(self) -> ResultStatus:
        return rollup_status(scenario.status for scenario in self._scenarios)

    def add_scenario(self, scenario: ScenarioResult) -> None:
        """Append a completed scenario."""
        self._scenarios.append(scenario)
