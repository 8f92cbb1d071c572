"""Scenario runner executing steps and collecting feature results."""

import functools
import logging
from collections.abc import Callable, Generator, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

from bdd_runner.errors import ScenarioNameError
from bdd_runner.feature import get_description
from bdd_runner.models.result import FeatureResult, ScenarioResult
from bdd_runner.naming import format_name
from bdd_runner.notifiers.base import ProgressNotifier
from bdd_runner.notifiers.console import ConsoleProgressNotifier
from bdd_runner.step import Step, prepare_steps

log = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

_current_scenario: ContextVar[str | None] = ContextVar(
    "bdd_current_scenario", default=None
)


@contextmanager
def scenario_name(name: str) -> Iterator[None]:
    """Bind the name used by ``run_scenario`` calls made without one."""
    token = _current_scenario.set(name)
    try:
        yield
    finally:
        _current_scenario.reset(token)


def scenario(func: Callable[P, R]) -> Callable[P, R]:
    """Name scenarios run inside the decorated function after the function.

    Example::

        @scenario
        def Successful_login():
            runner.run_scenario(Given_user_is_about_to_login, Then_login_is_successful)

    """
    name = format_name(func.__name__)

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with scenario_name(name):
            return func(*args, **kwargs)

    return wrapper


class BDDRunner:
    """Runs behavior scenarios for one feature and records their results.

    The feature name is derived from the name of the given test class (or
    module) unless a name is given, and its description from the
    ``@description`` decorator.

    A runner and its result are meant to be used from a single thread;
    scenarios of one runner must not run concurrently.
    """

    def __init__(
        self,
        test_class: object,
        progress_notifier: ProgressNotifier | None = None,
        *,
        name: str | None = None,
    ) -> None:
        if name is None:
            identifier: str = test_class.__name__  # type: ignore[attr-defined]
            name = format_name(identifier.rpartition(".")[2])
        self._result = FeatureResult(
            name=name,
            description=get_description(test_class),
        )
        self.progress_notifier = progress_notifier or ConsoleProgressNotifier()
        self.progress_notifier.notify_feature_start(
            self._result.name, self._result.description
        )

    @property
    def result(self) -> FeatureResult:
        """Feature result gathering every scenario run so far."""
        return self._result

    def run_scenario(
        self, *steps: Callable[[], object], name: str | None = None
    ) -> None:
        """Run the given steps in order.

        Execution stops at the first step that raises; the remaining steps are
        not run. The scenario result is recorded in any case and the step's
        exception is then re-raised to the caller.

        Args:
            steps: Zero-argument callables; each step name is derived from the
                callable's name
            name: Scenario name; defaults to the name bound with
                ``scenario_name`` or the ``scenario`` decorator

        Raises:
            ScenarioNameError: If no name is given and none is bound

        """
        resolved = name if name is not None else _current_scenario.get()
        if resolved is None:
            raise ScenarioNameError(
                "Scenario name was not given; pass name= or run inside @scenario"
            )

        self.progress_notifier.notify_scenario_start(resolved)

        with self._recording(resolved, prepare_steps(steps)) as prepared:
            for step in prepared:
                if (error := self._perform_step(step, len(prepared))) is not None:
                    raise error

    @contextmanager
    def _recording(
        self, name: str, steps: Sequence[Step]
    ) -> Generator[Sequence[Step], None, None]:
        """Record the scenario result on every exit path."""
        try:
            yield steps
        finally:
            result = ScenarioResult(name=name, steps=[step.result for step in steps])
            self._result.add_scenario(result)
            log.info("Scenario '%s' %s", result.name, result.status)
            self.progress_notifier.notify_scenario_finished(result.status)

    def _perform_step(self, step: Step, total: int) -> BaseException | None:
        self.progress_notifier.notify_step_start(step.name, step.number, total)
        log.debug("Running step %d/%d: %s", step.number, total, step.name)

        error = step.invoke()
        if error is not None:
            log.warning(
                "Step %d/%d '%s' failed: %s",
                step.number,
                total,
                step.name,
                error,
            )
        return error
