"""RationalService — exact fraction arithmetic from text operands."""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable

from valkit.domain.rational import Rational
from valkit.services.base import BaseService
from valkit.services.contracts import RationalData, dump_validated
from valkit.services.result import ServiceResult

logger = logging.getLogger(__name__)

OPERATORS: dict[str, Callable[[Rational, Rational], Rational]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
}


class RationalService(BaseService):
    """Parse two rationals and combine them."""

    def evaluate(self, left: str, op_name: str, right: str) -> ServiceResult:
        """Compute ``left <op> right`` where operands are ``"n/d"`` or ``"n"``."""
        op = f"rational_{op_name}"
        fn = OPERATORS.get(op_name)
        if fn is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_OPERATOR",
                f"Unknown operator {op_name!r}",
                detail={"valid": sorted(OPERATORS)},
            )

        try:
            lhs = Rational.parse(left)
            rhs = Rational.parse(right)
        except ValueError as exc:
            logger.debug("Rejected rational operand", exc_info=True)
            return ServiceResult.failure(
                op,
                "INVALID_RATIONAL",
                str(exc),
                detail={"left": left, "right": right},
            )

        value = fn(lhs, rhs)
        data = dump_validated(
            RationalData,
            {
                "left": str(lhs),
                "right": str(rhs),
                "result": str(value),
                "numerator": value.numerator,
                "denominator": value.denominator,
            },
        )
        return ServiceResult.success(op, data)
