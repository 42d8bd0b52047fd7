"""Click Command subclass with ``--examples`` support.

``--help`` stays short; ``--examples`` prints usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesCommand(click.Command):
    """Click Command that accepts an ``examples`` text block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


def parse_label_option(
    _ctx: click.Context | None, _param: click.Parameter | None, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Click callback: turn repeated ``-l key=value`` options into pairs.

    Only the first ``=`` separates key from value here; the builder and
    parser decide what is valid afterwards.
    """
    pairs: list[tuple[str, str]] = []
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got {raw!r}")
        pairs.append((key, value))
    return pairs
