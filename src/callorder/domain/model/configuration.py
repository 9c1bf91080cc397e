"""pytest plugin configuration.

Built from ini options (pytest.ini, tox.ini or [tool.pytest.ini_options]).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PluginConfig:
    """Immutable plugin configuration with FAIL-FIRST validation.

    Attributes:
        auto_verify: Verify the call_order_verifier fixture at teardown.
        report: Attach a call order report to VerifierError failures.
        report_width: Width of the attached report (must be > 0).
    """

    auto_verify: bool = False
    report: bool = True
    report_width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.report_width <= 0:
            raise ValueError(f"report_width must be > 0, got {self.report_width}")
