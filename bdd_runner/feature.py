"""Feature metadata attached to test classes."""

from collections.abc import Callable
from typing import TypeVar

from bdd_runner.errors import FeatureConfigurationError

DESCRIPTION_ATTRIBUTE = "__bdd_description__"

T = TypeVar("T", bound=type)


def description(text: str) -> Callable[[T], T]:
    """Attach a feature description to a test class.

    The description is inherited by subclasses. Decorating the same class
    twice, or with a blank text, raises FeatureConfigurationError.
    """
    if not text.strip():
        raise FeatureConfigurationError("Feature description must not be blank")

    def decorate(cls: T) -> T:
        if DESCRIPTION_ATTRIBUTE in vars(cls):
            raise FeatureConfigurationError(
                f"Feature '{cls.__name__}' already has a description"
            )
        setattr(cls, DESCRIPTION_ATTRIBUTE, text)
        return cls

    return decorate


def get_description(test_class: object) -> str | None:
    """Return the description attached to a test class or module, if any."""
    value = getattr(test_class, DESCRIPTION_ATTRIBUTE, None)
    if value is not None and not isinstance(value, str):
        raise FeatureConfigurationError(
            f"Feature description must be a string, got {type(value).__name__}"
        )
    return value
