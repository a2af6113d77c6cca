"""Tests for the evaluate/evaluate_report entry points."""

from __future__ import annotations

import json

import pytest

from triadcalc.core.config import CalcConfig
from triadcalc.core.errors import CalcError, DivisionByZeroError, NestingDepthError
from triadcalc.core.expression import Number, NumberKind, evaluate, evaluate_report


class TestEvaluate:
    def test_strips_surrounding_whitespace(self) -> None:
        assert evaluate("   2+3\n") == Number.integer(5)

    def test_raises_with_source_snippet(self) -> None:
        with pytest.raises(DivisionByZeroError) as exc_info:
            evaluate("1/0")
        context = exc_info.value.context
        assert context is not None
        assert context.snippet() == "1/0\n ^"

    def test_respects_configured_depth(self) -> None:
        config = CalcConfig(max_depth=2)
        assert evaluate("((1+1))", config) == Number.integer(2)
        with pytest.raises(NestingDepthError):
            evaluate("(((1+1)))", config)


class TestEvaluateReport:
    def test_success(self) -> None:
        report = evaluate_report("2*(3+4)")
        assert report.ok
        assert report.value == "14"
        assert report.kind == NumberKind.INTEGER
        assert report.summary_line() == "Solved: 14"

    def test_decimal_success(self) -> None:
        report = evaluate_report("3+4.5")
        assert report.kind == NumberKind.DECIMAL
        assert report.summary_line() == "Solved: 7.5"

    def test_division_by_zero(self) -> None:
        report = evaluate_report("1/0")
        assert not report.ok
        assert report.error_kind == "DivisionByZeroError"
        assert report.column == 2
        assert report.summary_line() == "Error while solving: Division by zero (column 2)"

    def test_structural_reason_is_reported(self) -> None:
        report = evaluate_report("5")
        assert report.error_kind == "incomplete_expression"

    def test_never_raises_calc_error(self) -> None:
        for source in ["", "()", "+", "1/0", "9223372036854775807*2"]:
            report = evaluate_report(source)
            assert not report.ok
            assert report.value is None

    def test_oversized_integer_literal_is_solved_as_decimal(self) -> None:
        report = evaluate_report("1" * 5000 + "+1")
        assert report.ok
        assert report.kind == NumberKind.DECIMAL
        assert report.summary_line() == "Solved: inf"

    def test_small_decimal_result_has_no_exponent(self) -> None:
        assert evaluate_report("0.00001*1").summary_line() == "Solved: 0.00001"

    def test_json_serialization(self) -> None:
        data = json.loads(evaluate_report(" 10-3-2 ").model_dump_json())
        assert data["expression"] == "10-3-2"
        assert data["value"] == "5"
        assert data["kind"] == "integer"
        assert data["error"] is None


class TestErrorHierarchy:
    def test_all_errors_share_base(self) -> None:
        with pytest.raises(CalcError):
            evaluate("1%0")
