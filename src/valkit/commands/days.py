"""Command group: days of the week."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valkit.commands._base import ValkitGroup

if TYPE_CHECKING:
    from valkit.commands._context import AppContext

_DAYS_EXAMPLES = """\
  valkit days list
  VALKIT_DAYS__FIRST_DAY=Monday valkit days list
  valkit --json days get Sunday"""


@click.group(cls=ValkitGroup, examples=_DAYS_EXAMPLES)
def days() -> None:
    """List days of the week and look them up by name."""


@days.command(name="list", examples="  valkit days list\n  valkit -q days list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all days, starting at the configured first day."""
    from valkit.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).list_days())


@days.command(examples="  valkit days get Sunday")
@click.argument("name")
@click.pass_obj
def get(app: AppContext, name: str) -> None:
    """Look up a day by its exact NAME (e.g. Sunday)."""
    from valkit.services.calendar import CalendarService

    app.emit(CalendarService(app.settings).get_day(name))
