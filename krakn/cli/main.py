# -*- coding: utf-8 -*-
"""Entry point: the ``krakn`` command group."""
from __future__ import annotations

import logging
from typing import List

import click

from .. import __version__
from ..constant import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from ..errors import KraknError
from .accounts_cmd import add_cmd, list_cmd, remove_cmd
from .directory_cmd import directory_config_cmd, show_includes_cmd
from .keys_cmd import generate_key_cmd
from .migrate_cmd import migrate_cmd, run_migration
from .providers_cmd import providers_cmd
from .use_cmd import global_cmd, use_cmd
from .utils import KraknPaths

logger = logging.getLogger(__name__)

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

# Commands that never trigger the first-run import.
_NO_MIGRATION_CHECK = {"migrate"}
_HELP_FLAGS = {"--help", "-h"}


class KraknGroup(click.Group):
    """Group that remembers whether help was requested anywhere in argv."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.meta["krakn.help_requested"] = any(a in _HELP_FLAGS for a in args)
        return super().parse_args(ctx, args)


@click.group(
    cls=KraknGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, prog_name="krakn")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar=LOG_LEVEL_ENV,
    help="Log verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Manage several git hosting accounts on one machine."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = KraknPaths.from_env()

    if ctx.meta.get("krakn.help_requested"):
        return
    if ctx.invoked_subcommand in _NO_MIGRATION_CHECK:
        return
    try:
        run_migration(ctx.obj, force=False)
    except KraknError as exc:
        # The first-run import must never block the requested command.
        logger.warning("First-run import skipped: %s", exc.format_message())
    except click.Abort:
        # EOF or Ctrl-C at a prompt; offered again on the next run.
        click.echo("\nImport skipped; run 'krakn migrate' to import later.")
        logger.warning("First-run import aborted at a prompt")


cli.add_command(generate_key_cmd)
cli.add_command(add_cmd)
cli.add_command(list_cmd)
cli.add_command(list_cmd, name="ls")
cli.add_command(remove_cmd)
cli.add_command(use_cmd)
cli.add_command(global_cmd)
cli.add_command(directory_config_cmd)
cli.add_command(show_includes_cmd)
cli.add_command(providers_cmd)
cli.add_command(migrate_cmd)
