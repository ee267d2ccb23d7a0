"""Tagged variants — closed sets of alternatives consumed with ``match``.

Each variant type is a union of frozen dataclasses, one per case.
Cases without payload are still classes so that ``match`` can use
class patterns uniformly (``case Vim():``).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, assert_never

# --- FavoriteIDE ---


@dataclass(frozen=True)
class VSCode:
    version: int


@dataclass(frozen=True)
class Vim:
    pass


@dataclass(frozen=True)
class IDEA:
    major_version: int
    minor_version: int


type FavoriteIDE = VSCode | Vim | IDEA


def describe_ide(ide: FavoriteIDE) -> str:
    """Short label for an IDE choice.

    Examples:
        >>> describe_ide(VSCode(1))
        'code 1'
        >>> describe_ide(IDEA(1, 2))
        'idea 1.2'
    """
    match ide:
        case VSCode(version=v):
            return f"code {v}"
        case IDEA(major_version=major, minor_version=minor):
            return f"idea {major}.{minor}"
        case Vim():
            return "vim"
        case _:
            assert_never(ide)


# --- Color ---


@dataclass(frozen=True)
class Red:
    pass


@dataclass(frozen=True)
class Green:
    pass


@dataclass(frozen=True)
class Blue:
    pass


@dataclass(frozen=True)
class Custom:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                msg = f"Color channel out of range 0..255: {channel}"
                raise ValueError(msg)


type Color = Red | Green | Blue | Custom


def to_rgb(color: Color) -> tuple[int, int, int]:
    """Return the ``(red, green, blue)`` triple for any color."""
    match color:
        case Red():
            return (255, 0, 0)
        case Green():
            return (0, 255, 0)
        case Blue():
            return (0, 0, 255)
        case Custom(red=r, green=g, blue=b):
            return (r, g, b)
        case _:
            assert_never(color)


# --- Result ---


@dataclass(frozen=True)
class Succeed[V]:
    value: V


@dataclass(frozen=True)
class Fail[E]:
    error: E


type Result[E, V] = Succeed[V] | Fail[E]


def map_result[E, V, W](result: Result[E, V], fn: Callable[[V], W]) -> Result[E, W]:
    """Apply *fn* to a success value; pass failures through untouched."""
    match result:
        case Succeed(value=value):
            return Succeed(fn(value))
        case Fail():
            return result
        case _:
            assert_never(result)


def result_or[E, V](result: Result[E, V], default: V) -> V:
    """Unwrap a success value, or return *default* on failure."""
    match result:
        case Succeed(value=value):
            return value
        case _:
            return default


# --- Workflow ---


@dataclass(frozen=True)
class End[O]:
    value: O


type Workflow[O] = End[O]


def run_workflow[O](workflow: Workflow[O], workflow_input: Any) -> O:
    """Run a workflow to completion. ``End`` ignores its input."""
    match workflow:
        case End(value=value):
            return value
        case _:
            assert_never(workflow)


# --- Conversion ---

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Conversion(StrEnum):
    """Conversions with a fixed source and target type."""

    ANY_TO_STRING = "any_to_string"  # Any -> str
    STRING_TO_INT = "string_to_int"  # str -> int | None


def convert(conversion: Conversion, value: Any) -> Any:
    """Apply *conversion* to *value*.

    ``STRING_TO_INT`` returns ``None`` for anything that is not a plain
    base-10 integer string.
    """
    match conversion:
        case Conversion.ANY_TO_STRING:
            return str(value)
        case Conversion.STRING_TO_INT:
            if not isinstance(value, str) or not _INTEGER.fullmatch(value):
                return None
            return int(value)
        case _:
            assert_never(conversion)
