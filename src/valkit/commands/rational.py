"""Command group: exact rational arithmetic."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valkit.commands._base import ValkitGroup

if TYPE_CHECKING:
    from valkit.commands._context import AppContext

_RATIONAL_EXAMPLES = """\
  valkit rational add 1/2 1/3
  valkit rational sub 3/4 1/4
  valkit --json rational mul 2/3 -3/4"""


@click.group(cls=ValkitGroup, examples=_RATIONAL_EXAMPLES)
def rational() -> None:
    """Add, subtract, and multiply fractions like 1/2."""


def _evaluate(app: AppContext, op_name: str, left: str, right: str) -> None:
    from valkit.services.rational import RationalService

    app.emit(RationalService(app.settings).evaluate(left, op_name, right))


# Negative operands ("-3/4") must not be parsed as options.
_OPERANDS = {"context_settings": {"ignore_unknown_options": True}}


@rational.command(**_OPERANDS)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def add(app: AppContext, left: str, right: str) -> None:
    """Compute LEFT + RIGHT."""
    _evaluate(app, "add", left, right)


@rational.command(**_OPERANDS)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def sub(app: AppContext, left: str, right: str) -> None:
    """Compute LEFT - RIGHT."""
    _evaluate(app, "sub", left, right)


@rational.command(**_OPERANDS)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def mul(app: AppContext, left: str, right: str) -> None:
    """Compute LEFT * RIGHT."""
    _evaluate(app, "mul", left, right)
