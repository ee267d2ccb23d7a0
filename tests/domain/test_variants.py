"""Tests for tagged variants and their match-based helpers."""

from __future__ import annotations

import dataclasses

import pytest

from valkit.domain.variants import (
    IDEA,
    Blue,
    Conversion,
    Custom,
    End,
    Fail,
    Green,
    Red,
    Succeed,
    Vim,
    VSCode,
    convert,
    describe_ide,
    map_result,
    result_or,
    run_workflow,
    to_rgb,
)


class TestFavoriteIDE:
    def test_vscode(self) -> None:
        assert describe_ide(VSCode(1)) == "code 1"

    def test_idea(self) -> None:
        assert describe_ide(IDEA(1, 2)) == "idea 1.2"

    def test_vim(self) -> None:
        assert describe_ide(Vim()) == "vim"

    def test_equality_by_payload(self) -> None:
        assert VSCode(1) == VSCode(1)
        assert VSCode(1) != VSCode(2)
        assert Vim() == Vim()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            VSCode(1).version = 2  # type: ignore[misc]


class TestColor:
    @pytest.mark.parametrize(
        "color,rgb",
        [
            (Red(), (255, 0, 0)),
            (Green(), (0, 255, 0)),
            (Blue(), (0, 0, 255)),
            (Custom(1, 2, 3), (1, 2, 3)),
        ],
    )
    def test_to_rgb(self, color: object, rgb: tuple[int, int, int]) -> None:
        assert to_rgb(color) == rgb  # type: ignore[arg-type]

    def test_custom_channel_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="0..255"):
            Custom(256, 0, 0)

    def test_custom_negative_channel(self) -> None:
        with pytest.raises(ValueError):
            Custom(0, -1, 0)


class TestResult:
    def test_map_success(self) -> None:
        assert map_result(Succeed(2), lambda v: v * 10) == Succeed(20)

    def test_map_failure_passes_through(self) -> None:
        failure: Fail[str] = Fail("boom")
        assert map_result(failure, lambda v: v * 10) is failure

    def test_result_or(self) -> None:
        assert result_or(Succeed(1), 0) == 1
        assert result_or(Fail("boom"), 0) == 0


class TestWorkflow:
    def test_end_ignores_input(self) -> None:
        assert run_workflow(End("done"), 42) == "done"
        assert run_workflow(End("done"), None) == "done"


class TestConversion:
    def test_any_to_string(self) -> None:
        assert convert(Conversion.ANY_TO_STRING, 42) == "42"
        assert convert(Conversion.ANY_TO_STRING, None) == "None"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            ("-7", -7),
            ("+3", 3),
            ("abc", None),
            ("", None),
            ("4.2", None),
            (" 42", None),
        ],
    )
    def test_string_to_int(self, text: str, expected: int | None) -> None:
        assert convert(Conversion.STRING_TO_INT, text) == expected

    @pytest.mark.parametrize("value", [42, None, b"42"])
    def test_string_to_int_non_string(self, value: object) -> None:
        assert convert(Conversion.STRING_TO_INT, value) is None
