"""Command: show how a value would be quoted."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labeledname.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from labeledname.commands._context import AppContext


@click.command(
    cls=ExamplesCommand,
    examples="""\
  labeledname quote 'before?after'
  labeledname quote --domain 'metrics*'""",
)
@click.argument("value")
@click.option("--domain", "as_domain", is_flag=True, help="Quote as a domain instead of a value.")
@click.pass_obj
def quote(app: AppContext, value: str, as_domain: bool) -> None:
    """Quote VALUE the way the renderer would."""
    app.emit(app.naming.quote(value, domain=as_domain))
