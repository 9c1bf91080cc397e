"""pytest plugin for callorder.

Provides fixtures for call order testing:
    call_order_verifier: Fresh CallOrderVerifier per test
    call_token_registry: Fresh TokenRegistry per test
    callorder_config: Plugin configuration (override in conftest.py)

Configuration (pytest.ini or pyproject.toml):
    callorder_auto_verify: Verify call_order_verifier at teardown (default: false)
    callorder_report: Attach call order report to VerifierError failures (default: true)
    callorder_report_width: Width of the attached report (default: 120)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from callorder.application.reporters.console import CallOrderReporter, ReportConfig
from callorder.application.verifier import CallOrderVerifier
from callorder.domain.exceptions import VerifierError
from callorder.domain.model.configuration import PluginConfig

# Register fixtures from fixtures module
from callorder.presentation.pytest_plugin.fixtures import (
    CALL_FAILED_KEY,
    call_order_verifier,
    call_token_registry,
    callorder_config,
    load_config,
)

if TYPE_CHECKING:
    from collections.abc import Generator

# Export fixtures for pytest discovery
__all__ = [
    "call_order_verifier",
    "call_token_registry",
    "callorder_config",
]

REPORT_SECTION = "call order"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "callorder_auto_verify",
        type="bool",
        default=False,
        help="verify the call_order_verifier fixture at teardown",
    )
    parser.addini(
        "callorder_report",
        type="bool",
        default=True,
        help="attach recorded calls to VerifierError failures",
    )
    parser.addini(
        "callorder_report_width",
        default="120",
        help="width of the attached call order report",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "callorder: mark test as call order test",
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item,
    call: pytest.CallInfo[None],
) -> Generator[None, Any, None]:
    """Remember body failures and attach report to VerifierError failures."""
    outcome = yield
    report: pytest.TestReport = outcome.get_result()

    if report.when == "call":
        item.stash[CALL_FAILED_KEY] = report.failed

    if not report.failed or call.excinfo is None:
        return
    if not call.excinfo.errisinstance(VerifierError):
        return

    verifier = getattr(item, "funcargs", {}).get("call_order_verifier")
    if not isinstance(verifier, CallOrderVerifier):
        return

    # conftest override of callorder_config wins over ini options
    plugin_config = item.funcargs.get("callorder_config")
    if not isinstance(plugin_config, PluginConfig):
        plugin_config = load_config(item.config)
    if not plugin_config.report:
        return

    reporter = CallOrderReporter(ReportConfig(width=plugin_config.report_width))
    report.sections.append((REPORT_SECTION, reporter.report(verifier)))
