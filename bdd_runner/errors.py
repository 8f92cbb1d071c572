"""Exceptions raised by the runner for configuration problems."""


class BDDRunnerError(Exception):
    """Base class for runner errors."""


class FeatureConfigurationError(BDDRunnerError):
    """Raised when feature metadata on a test class is invalid."""


class ScenarioNameError(BDDRunnerError):
    """Raised when no scenario name was given and none is bound."""


class StepAlreadyExecutedError(BDDRunnerError):
    """Raised when a step is invoked more than once."""
