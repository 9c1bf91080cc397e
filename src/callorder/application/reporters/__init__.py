"""Reporters for call order verification state."""

from callorder.application.reporters.console import CallOrderReporter, ReportConfig

__all__ = [
    "CallOrderReporter",
    "ReportConfig",
]
