"""Tests for CallOrderReporter.

Tests:
- ReportConfig default values, customization and validation
- Report sections (header, recorded calls, expected orders)
- max_calls truncation
"""

import pytest

from callorder.application.reporters.console import CallOrderReporter, ReportConfig
from callorder.application.verifier import CallOrderVerifier
from tests.factories import METHOD_1, METHOD_2, METHOD_3, record


@pytest.fixture
def verifier() -> CallOrderVerifier:
    verifier = CallOrderVerifier()
    record(verifier, METHOD_1, 1)
    record(verifier, METHOD_2)
    record(verifier, METHOD_3)
    verifier.declare_order(METHOD_1, METHOD_2, 1)
    verifier.declare_order(METHOD_2, METHOD_3, -1, 0)
    return verifier


class TestReportConfig:
    """Tests for ReportConfig."""

    def test_default_values(self) -> None:
        config = ReportConfig()
        assert config.width == 120
        assert config.force_terminal is False
        assert config.max_calls is None

    def test_custom_values(self) -> None:
        config = ReportConfig(width=80, force_terminal=True, max_calls=5)
        assert config.width == 80
        assert config.force_terminal is True
        assert config.max_calls == 5

    def test_non_positive_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be > 0"):
            ReportConfig(width=0)

    def test_negative_max_calls_raises(self) -> None:
        with pytest.raises(ValueError, match="max_calls must be >= 0"):
            ReportConfig(max_calls=-1)


class TestCallOrderReporter:
    """Tests for CallOrderReporter.report()."""

    def test_report_contains_header(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter().report(verifier)
        assert "CALL ORDER" in output
        assert "Recorded calls: 3" in output
        assert "Expected orders: 2" in output

    def test_report_lists_recorded_calls(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter().report(verifier)
        assert "MethodCall_1[1]" in output
        assert "MethodCall_2" in output
        assert "MethodCall_3" in output

    def test_report_keeps_call_order(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter().report(verifier)
        assert output.index("MethodCall_1[1]") < output.index("MethodCall_3")

    def test_report_lists_expected_orders(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter().report(verifier)
        assert "#1  MethodCall_1[1] -> MethodCall_2" in output
        assert "#2  MethodCall_2[+1] -> MethodCall_3" in output

    def test_plain_output_by_default(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter().report(verifier)
        assert "\x1b[" not in output

    def test_force_terminal_emits_styles(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter(ReportConfig(force_terminal=True)).report(verifier)
        assert "\x1b[" in output

    def test_max_calls_truncates_history(self, verifier: CallOrderVerifier) -> None:
        output = CallOrderReporter(ReportConfig(max_calls=1)).report(verifier)
        assert "MethodCall_1[1]" in output
        assert "2 more call(s) not shown" in output

    def test_empty_verifier(self) -> None:
        output = CallOrderReporter().report(CallOrderVerifier())
        assert "Recorded calls: 0" in output
        assert "No calls recorded." in output
        assert "No call orders declared." in output

    def test_returns_str_without_printing(
        self,
        verifier: CallOrderVerifier,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        output = CallOrderReporter().report(verifier)
        assert isinstance(output, str)
        assert capsys.readouterr().out == ""
