"""pytest fixtures for call order testing.

User overrides callorder_config in their conftest.py to bypass ini options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from callorder.application.verifier import CallOrderVerifier
from callorder.domain.model.call_token import TokenRegistry
from callorder.domain.model.configuration import PluginConfig

if TYPE_CHECKING:
    from collections.abc import Iterator

# Set by pytest_runtest_makereport when the test body failed
CALL_FAILED_KEY = pytest.StashKey[bool]()


def load_config(config: pytest.Config) -> PluginConfig:
    """Build PluginConfig from ini options.

    Args:
        config: pytest Config object

    Returns:
        PluginConfig with ini values

    Raises:
        ValueError: callorder_report_width is not a positive integer.
    """
    width = str(config.getini("callorder_report_width") or "120")
    return PluginConfig(
        auto_verify=bool(config.getini("callorder_auto_verify")),
        report=bool(config.getini("callorder_report")),
        report_width=int(width),
    )


@pytest.fixture(scope="session")
def callorder_config(request: pytest.FixtureRequest) -> PluginConfig:
    """Plugin configuration read from ini options.

    Returns:
        PluginConfig
    """
    return load_config(request.config)


@pytest.fixture
def call_token_registry() -> Iterator[TokenRegistry]:
    """Fresh TokenRegistry per test, reset afterwards.

    Returns:
        Empty TokenRegistry
    """
    registry = TokenRegistry()
    yield registry
    registry.reset()


@pytest.fixture
def call_order_verifier(
    request: pytest.FixtureRequest,
    callorder_config: PluginConfig,
) -> Iterator[CallOrderVerifier]:
    """Fresh CallOrderVerifier per test.

    With callorder_auto_verify enabled, verify() runs at teardown unless
    the test body already failed.

    Returns:
        Empty CallOrderVerifier
    """
    verifier = CallOrderVerifier()
    yield verifier

    if callorder_config.auto_verify and not request.node.stash.get(CALL_FAILED_KEY, False):
        verifier.verify()
