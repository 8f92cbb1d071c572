"""Wrapper executing a single step callable and recording its result."""

import functools
import traceback
from collections.abc import Callable, Sequence
from dataclasses import replace

from bdd_runner.errors import StepAlreadyExecutedError
from bdd_runner.models.result import StepFailure, StepResult
from bdd_runner.naming import format_name


def step_identifier(action: Callable[[], object]) -> str:
    """Return the identifier a step name is derived from."""
    while isinstance(action, functools.partial):
        action = action.func
    name = getattr(action, "__name__", None)
    if isinstance(name, str):
        return name
    return type(action).__name__


class Step:
    """A step callable with its position in the scenario and its result."""

    def __init__(self, action: Callable[[], object], number: int) -> None:
        self.action = action
        self.result = StepResult(
            name=format_name(step_identifier(action)), number=number
        )

    @property
    def name(self) -> str:
        return self.result.name

    @property
    def number(self) -> int:
        return self.result.number

    def invoke(self) -> BaseException | None:
        """Run the step and record whether it passed.

        Returns the exception raised by the step, or None when it passed.
        The exception is not re-raised here; the caller decides.
        """
        if self.result.status != "not-run":
            raise StepAlreadyExecutedError(
                f"Step {self.number} '{self.name}' was already executed"
            )
        try:
            self.action()
        except BaseException as exc:
            self.result = replace(
                self.result,
                status="failed",
                failure=StepFailure(
                    exception_type=type(exc).__name__,
                    message=str(exc),
                    traceback="".join(traceback.format_exception(exc)),
                ),
            )
            return exc
        self.result = replace(self.result, status="passed")
        return None


def prepare_steps(actions: Sequence[Callable[[], object]]) -> Sequence[Step]:
    """Wrap step callables, numbering them from 1 in the given order."""
    return tuple(Step(action, number) for number, action in enumerate(actions, 1))
