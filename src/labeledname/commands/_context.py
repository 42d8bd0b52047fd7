"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, the naming service, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from labeledname.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from labeledname.config.settings import LabeledNameSettings
    from labeledname.services.naming import NamingService
    from labeledname.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LabeledNameSettings) -> None:
        self.settings = settings
        self._naming: NamingService | None = None

        from labeledname.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def naming(self) -> NamingService:
        """The naming service (created lazily on first access)."""
        if self._naming is None:
            from labeledname.services.naming import NamingService

            self._naming = NamingService(self.settings.render)
        return self._naming

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode,
          where they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
