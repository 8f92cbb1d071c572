"""Test factories for generating result data."""

from polyfactory import Use
from polyfactory.factories import DataclassFactory

from bdd_runner.models.result import ScenarioResult, StepFailure, StepResult


class StepFailureFactory(DataclassFactory[StepFailure]):
    """Factory for StepFailure."""

    __model__ = StepFailure

    exception_type = "AssertionError"


class StepResultFactory(DataclassFactory[StepResult]):
    """Factory for passed StepResult."""

    __model__ = StepResult

    status = "passed"
    failure = None


class FailedStepResultFactory(StepResultFactory):
    """Factory for failed StepResult."""

    __model__ = StepResult

    status = "failed"
    failure = Use(StepFailureFactory.build)


class ScenarioResultFactory(DataclassFactory[ScenarioResult]):
    """Factory for ScenarioResult with passed steps."""

    __model__ = ScenarioResult

    steps = Use(StepResultFactory.batch, size=2)
