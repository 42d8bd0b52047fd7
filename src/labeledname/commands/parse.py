"""Command: decode a labeled name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labeledname.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from labeledname.commands._context import AppContext


@click.command(
    cls=ExamplesCommand,
    examples="""\
  labeledname parse 'num_records[device_id=1312,region=eu]'
  labeledname --json parse 'jobs.failed[queue=emails]'""",
)
@click.argument("name")
@click.pass_obj
def parse(app: AppContext, name: str) -> None:
    """Show the base name and ordered labels of NAME."""
    app.emit(app.naming.parse(name))
