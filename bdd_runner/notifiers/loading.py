"""Loading of progress notifiers from entry points."""

from importlib.metadata import entry_points
from typing import Any

from bdd_runner.errors import BDDRunnerError
from bdd_runner.notifiers.manifest import NotifierManifest

ENTRY_POINT_GROUP = "bdd_runner.notifiers"


class NotifierNotFoundError(BDDRunnerError):
    """Raised when a notifier is not found."""


class InvalidNotifierError(BDDRunnerError):
    """Raised when a notifier entry point does not publish a manifest."""


def load_notifier_manifest(key: str) -> NotifierManifest[Any]:
    """Load a notifier manifest by key.

    Keys are matched case-insensitively and ignore surrounding whitespace, so
    values copied from ini files or the command line resolve as registered.

    Args:
        key: The notifier key as registered in pyproject.toml
             (e.g., "console", "logging")

    Returns:
        The notifier manifest instance

    Raises:
        NotifierNotFoundError: If no notifier with the given key is found
        InvalidNotifierError: If the entry point is not a NotifierManifest

    """
    wanted = key.strip().lower()
    entries = {
        entry.name.lower(): entry for entry in entry_points(group=ENTRY_POINT_GROUP)
    }

    if (entry := entries.get(wanted)) is None:
        raise NotifierNotFoundError(
            f"Notifier '{key}' not found. Available notifiers: {sorted(entries)}"
        )

    manifest = entry.load()
    if not isinstance(manifest, NotifierManifest):
        raise InvalidNotifierError(
            f"Entry point '{entry.name}' ({entry.value}) is not a NotifierManifest"
        )
    return manifest
