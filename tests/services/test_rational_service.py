"""Tests for RationalService."""

from __future__ import annotations

import pytest

from valkit.config.settings import ValkitSettings
from valkit.services.rational import RationalService


class TestEvaluate:
    @pytest.mark.parametrize(
        "op_name,left,right,expected",
        [
            ("add", "1/2", "1/3", "5/6"),
            ("sub", "3/4", "1/4", "1/2"),
            ("mul", "2/3", "-3/4", "-1/2"),
            ("add", "1/2", "1/2", "1"),
        ],
    )
    def test_operations(
        self,
        settings: ValkitSettings,
        op_name: str,
        left: str,
        right: str,
        expected: str,
    ) -> None:
        result = RationalService(settings).evaluate(left, op_name, right)
        assert result.ok, result.error
        assert result.op == f"rational_{op_name}"
        assert result.data["result"] == expected

    def test_payload_is_normalized(self, settings: ValkitSettings) -> None:
        result = RationalService(settings).evaluate("2/4", "mul", "2")
        assert result.data == {
            "left": "1/2",
            "right": "2",
            "result": "1",
            "numerator": 1,
            "denominator": 1,
        }

    def test_invalid_operand(self, settings: ValkitSettings) -> None:
        result = RationalService(settings).evaluate("one", "add", "1/2")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_RATIONAL"

    def test_zero_denominator(self, settings: ValkitSettings) -> None:
        result = RationalService(settings).evaluate("1/0", "add", "1/2")
        assert result.error is not None
        assert result.error.code == "INVALID_RATIONAL"

    def test_unknown_operator(self, settings: ValkitSettings) -> None:
        result = RationalService(settings).evaluate("1/2", "div", "1/2")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_OPERATOR"
        assert result.error.detail["valid"] == ["add", "mul", "sub"]
