"""Progress notifier emitting run events as log records."""

import logging
from typing import Literal

from bdd_runner.models.base import Model
from bdd_runner.models.result import ResultStatus
from bdd_runner.notifiers.base import ProgressNotifier
from bdd_runner.notifiers.manifest import NotifierManifest


class LoggingNotifierConfig(Model):
    """Configuration for the logging notifier."""

    logger_name: str = "bdd_runner.progress"
    level: Literal["DEBUG", "INFO", "WARNING"] = "INFO"


class LoggingProgressNotifier(ProgressNotifier):
    """Reports run events through a standard library logger."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO) -> None:
        self.logger = logger
        self.level = level

    @classmethod
    def from_config(cls, config: LoggingNotifierConfig) -> "LoggingProgressNotifier":
        return cls(
            logging.getLogger(config.logger_name),
            logging.getLevelNamesMapping()[config.level],
        )

    def notify_feature_start(self, name: str, description: str | None) -> None:
        if description:
            self.logger.log(self.level, "Feature started: %s (%s)", name, description)
        else:
            self.logger.log(self.level, "Feature started: %s", name)

    def notify_scenario_start(self, name: str) -> None:
        self.logger.log(self.level, "Scenario started: %s", name)

    def notify_step_start(self, name: str, number: int, total: int) -> None:
        self.logger.log(self.level, "Step %d/%d: %s", number, total, name)

    def notify_scenario_finished(self, status: ResultStatus) -> None:
        self.logger.log(self.level, "Scenario finished: %s", status)


logging_manifest = NotifierManifest(
    config_cls=LoggingNotifierConfig,
    notifier_factory=LoggingProgressNotifier.from_config,
)
