"""Command: render labeled names as destination identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labeledname.commands._base import ExamplesCommand

if TYPE_CHECKING:
    from labeledname.commands._context import AppContext


@click.command(
    cls=ExamplesCommand,
    examples="""\
  labeledname render 'num_records[device_id=1312]'
  labeledname render --domain my-metrics 'a[k=v]' 'b[k=before?after]'
  labeledname render --include-type --type gauges 'queue.depth[queue=emails]'
  labeledname render --match 'metrics:name=jobs*,*' 'jobs[q=a]' 'http[m=GET]'""",
)
@click.argument("names", nargs=-1, required=True)
@click.option("--domain", default=None, help="Destination domain (default: [render] domain).")
@click.option("--type", "metric_type", default="counters", help="Metric type for the type key.")
@click.option(
    "--include-type/--no-include-type",
    default=None,
    help="Emit a type key after name (default: [render] include_type).",
)
@click.option(
    "--match",
    default=None,
    help="Only show identifiers selected by this destination pattern.",
)
@click.pass_obj
def render(
    app: AppContext,
    names: tuple[str, ...],
    domain: str | None,
    metric_type: str,
    include_type: bool | None,
    match: str | None,
) -> None:
    """Render each NAME as domain:name=...,key=value."""
    app.emit(
        app.naming.render(
            list(names),
            domain=domain,
            metric_type=metric_type,
            include_type=include_type,
            match=match,
        )
    )
