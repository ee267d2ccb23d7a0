"""Command group: email address validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valkit.commands._base import ValkitGroup

if TYPE_CHECKING:
    from valkit.commands._context import AppContext

_EMAIL_EXAMPLES = """\
  valkit email check sherlock@holmes.com
  valkit --json email check not-an-email
  valkit email parts watson@bakerstreet.co.uk"""


@click.group(cls=ValkitGroup, examples=_EMAIL_EXAMPLES)
def email() -> None:
    """Validate email addresses and split them into parts."""


@email.command(
    examples="""\
  valkit email check sherlock@holmes.com
  valkit -q email check Sherlock@Holmes.COM
  valkit --json email check a@b.c"""
)
@click.argument("address")
@click.pass_obj
def check(app: AppContext, address: str) -> None:
    """Validate ADDRESS; exits 1 if it is not a well-formed email."""
    from valkit.services.email import EmailService

    app.emit(EmailService(app.settings).check(address))


@email.command(
    examples="""\
  valkit email parts sherlock@holmes.com
  valkit email parts no-at-sign"""
)
@click.argument("text")
@click.pass_obj
def parts(app: AppContext, text: str) -> None:
    """Split TEXT at the first '@' without requiring it to be valid."""
    from valkit.services.email import EmailService

    app.emit(EmailService(app.settings).parts(text))
