# -*- coding: utf-8 -*-
"""CLI command: import existing git/SSH identities."""
from __future__ import annotations

import click

from ..accounts import check_and_offer_migration
from .utils import ClickPrompter, KraknPaths, get_paths


def run_migration(paths: KraknPaths, *, force: bool) -> int:
    imported = check_and_offer_migration(
        ClickPrompter(),
        force=force,
        config_path=paths.config_path,
        ssh_dir=paths.ssh_dir,
        ssh_config=paths.ssh_config,
        global_config=paths.global_config,
    )
    if imported:
        click.echo(f"\n✓ Imported {len(imported)} account(s)!")
        click.echo("\nNext steps:")
        click.echo("   • 'krakn list' shows your accounts")
        click.echo("   • 'krakn config ~/work work' sets up directory switching")
        click.echo("   • 'krakn add' adds more accounts")
    return len(imported)


@click.command("migrate")
@click.pass_context
def migrate_cmd(ctx: click.Context) -> None:
    """Import the existing global git identity and SSH host aliases."""
    if run_migration(get_paths(ctx), force=True) == 0:
        click.echo("Nothing imported.")
