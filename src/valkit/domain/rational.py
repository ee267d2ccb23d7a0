"""Rational numbers ``n/d`` with exact arithmetic.

Values are kept in lowest terms with a positive denominator, so equal
rationals compare and hash equal.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Self

_RATIONAL_PATTERN = re.compile(r"\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+)\s*)?")


@dataclass(frozen=True)
class Rational:
    """An exact fraction.

    Raises:
        ValueError: If *denominator* is zero.
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            msg = "Rational denominator must not be zero"
            raise ValueError(msg)
        sign = -1 if self.denominator < 0 else 1
        divisor = math.gcd(self.numerator, self.denominator) * sign
        object.__setattr__(self, "numerator", self.numerator // divisor)
        object.__setattr__(self, "denominator", self.denominator // divisor)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse ``"n/d"`` or ``"n"``.

        Examples:
            >>> Rational.parse("2/4")
            Rational(numerator=1, denominator=2)
            >>> Rational.parse("-3")
            Rational(numerator=-3, denominator=1)
        """
        match = _RATIONAL_PATTERN.fullmatch(text)
        if match is None:
            msg = f"Not a rational number: {text!r}"
            raise ValueError(msg)
        numerator, denominator = match.groups()
        return cls(int(numerator), int(denominator) if denominator else 1)

    def __add__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __sub__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def __mul__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"
