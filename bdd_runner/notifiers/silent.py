"""Progress notifier discarding every event."""

from bdd_runner.models.base import Model
from bdd_runner.models.result import ResultStatus
from bdd_runner.notifiers.base import ProgressNotifier
from bdd_runner.notifiers.manifest import NotifierManifest


class SilentNotifierConfig(Model):
    """The silent notifier takes no options."""


class SilentProgressNotifier(ProgressNotifier):
    """Notifier for runs that only need the result tree."""

    def notify_feature_start(self, name: str, description: str | None) -> None:
        pass

    def notify_scenario_start(self, name: str) -> None:
        pass

    def notify_step_start(self, name: str, number: int, total: int) -> None:
        pass

    def notify_scenario_finished(self, status: ResultStatus) -> None:
        pass


silent_manifest = NotifierManifest(
    config_cls=SilentNotifierConfig,
    notifier_factory=lambda config: SilentProgressNotifier(),
)
