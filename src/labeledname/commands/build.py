"""Command: build a canonical labeled name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labeledname.commands._base import ExamplesCommand, parse_label_option

if TYPE_CHECKING:
    from labeledname.commands._context import AppContext


@click.command(
    cls=ExamplesCommand,
    examples="""\
  labeledname build num_records -l device_id=1312
  labeledname build http server requests -l method=GET -l status=200
  labeledname -q build jobs failed -l queue=emails""",
)
@click.argument("base")
@click.argument("segments", nargs=-1)
@click.option(
    "-l",
    "--label",
    "labels",
    multiple=True,
    callback=parse_label_option,
    help="Label as key=value (repeatable, order is kept).",
)
@click.pass_obj
def build(
    app: AppContext,
    base: str,
    segments: tuple[str, ...],
    labels: list[tuple[str, str]],
) -> None:
    """Build BASE (dot-joined with SEGMENTS) with labels."""
    app.emit(app.naming.build(base, segments, labels))
