"""pytest plugin exposing a scenario runner to test functions.

Each test class (or module, for module-level tests) becomes a feature and each
test function run through the ``bdd_runner`` fixture names its scenario.
"""

import json
import logging
import re
from collections.abc import Generator

import pytest

from bdd_runner.naming import format_name
from bdd_runner.notifiers.base import ProgressNotifier
from bdd_runner.notifiers.loading import load_notifier_manifest
from bdd_runner.runner import BDDRunner, scenario_name

log = logging.getLogger(__name__)

_TEST_PREFIX = re.compile(r"^(?:test_|Test(?=[A-Z_])|test(?=[A-Z]))")


def strip_test_prefix(identifier: str) -> str:
    """Remove the prefix pytest uses to collect tests from an identifier."""
    return _TEST_PREFIX.sub("", identifier, count=1) or identifier


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register notifier selection options."""
    group = parser.getgroup("bdd", "behavior scenario runner")
    group.addoption(
        "--bdd-notifier",
        default=None,
        help="Progress notifier key (console, logging, silent)",
    )
    group.addoption(
        "--bdd-notifier-config",
        default=None,
        help="JSON configuration for the progress notifier",
    )
    parser.addini("bdd_notifier", "Progress notifier key", default="console")
    parser.addini(
        "bdd_notifier_config", "JSON configuration for the notifier", default="{}"
    )


def create_notifier(config: pytest.Config) -> ProgressNotifier:
    """Build the progress notifier selected by options or ini settings."""
    key = config.getoption("bdd_notifier") or config.getini("bdd_notifier")
    raw_config = config.getoption("bdd_notifier_config") or config.getini(
        "bdd_notifier_config"
    )

    notifier_config = json.loads(raw_config)
    if not isinstance(notifier_config, dict):
        raise ValueError("bdd_notifier_config must be a JSON object")

    log.debug("Using progress notifier: %s", key)
    return load_notifier_manifest(key).create(notifier_config)


@pytest.fixture(scope="module")
def bdd_features() -> dict[object, BDDRunner]:
    """Runners of one test module, keyed by test class or by the module."""
    return {}


@pytest.fixture
def bdd_feature(
    bdd_features: dict[object, BDDRunner], request: pytest.FixtureRequest
) -> BDDRunner:
    """Runner shared by the tests of one class, or of one module."""
    owner = request.cls if request.cls is not None else request.module
    if owner not in bdd_features:
        owner_name = owner.__name__.rpartition(".")[2]
        # Feature names skip the collection prefix, e.g. TestLogin -> Login.
        bdd_features[owner] = BDDRunner(
            owner,
            create_notifier(request.config),
            name=format_name(strip_test_prefix(owner_name)),
        )
    return bdd_features[owner]


@pytest.fixture
def bdd_runner(
    bdd_feature: BDDRunner, request: pytest.FixtureRequest
) -> Generator[BDDRunner, None, None]:
    """Feature runner naming scenarios after the running test function."""
    function_name = getattr(request.node, "originalname", request.node.name)
    with scenario_name(format_name(strip_test_prefix(function_name))):
        yield bdd_feature
