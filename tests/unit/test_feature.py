"""Tests for feature description metadata."""

import pytest

from bdd_runner.errors import FeatureConfigurationError
from bdd_runner.feature import description, get_description


def test_description_attached_to_class() -> None:
    """Decorated class exposes its description."""

    @description("As a user I want to log in")
    class Login_feature:  # noqa: N801
        pass

    assert get_description(Login_feature) == "As a user I want to log in"


def test_description_missing() -> None:
    """Undecorated class has no description."""

    class Plain:
        pass

    assert get_description(Plain) is None


def test_description_inherited() -> None:
    """Subclasses inherit the description of their base."""

    @description("Base feature")
    class Base:
        pass

    class Derived(Base):
        pass

    assert get_description(Derived) == "Base feature"


def test_subclass_may_override_description() -> None:
    """A subclass can declare its own description once."""

    @description("Base feature")
    class Base:
        pass

    @description("Derived feature")
    class Derived(Base):
        pass

    assert get_description(Derived) == "Derived feature"
    assert get_description(Base) == "Base feature"


def test_duplicate_description_raises() -> None:
    """Two descriptions on the same class are a configuration error."""
    with pytest.raises(FeatureConfigurationError, match="already has a description"):

        @description("second")
        @description("first")
        class Login:
            pass


def test_blank_description_raises() -> None:
    """Blank descriptions are rejected at decoration time."""
    with pytest.raises(FeatureConfigurationError, match="blank"):
        description("   ")


def test_non_string_description_raises() -> None:
    """Descriptions set by hand must be strings."""

    class Broken:
        __bdd_description__ = 42

    with pytest.raises(FeatureConfigurationError, match="must be a string"):
        get_description(Broken)
