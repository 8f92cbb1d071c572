"""Notifier manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from bdd_runner.notifiers.base import ProgressNotifier

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class NotifierManifest(Generic[ConfigT]):
    """Manifest describing a progress notifier plugin.

    The manifest pairs the configuration class with the factory building the
    notifier, so notifiers can be selected by key from configuration.
    """

    config_cls: type[ConfigT]
    notifier_factory: Callable[[ConfigT], ProgressNotifier]

    def create(self, config: dict[str, object]) -> ProgressNotifier:
        """Validate raw configuration and build the notifier."""
        return self.notifier_factory(self.config_cls(**config))
