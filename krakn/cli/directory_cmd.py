# -*- coding: utf-8 -*-
"""CLI commands for per-directory identities via conditional includes."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..accounts import require_account
from ..config import Account, load_config
from ..errors import ConfigIOError, UserInputError
from ..gitconfig import configure_directory, list_conditional_includes
from .utils import ClickPrompter, KraknPaths, get_paths


def _setup_directory(
    paths: KraknPaths,
    directory: Path,
    account: Account,
) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigIOError("create directory", directory, exc) from exc

    config_path, added = configure_directory(
        directory,
        account,
        paths.global_config_file,
    )
    if added:
        click.echo(f"✓ Added conditional include to {paths.global_config_file}")
    else:
        click.echo("Conditional include already exists in global config")

    click.echo(f"✓ Directory '{directory}' configured for '{account.name}'")
    click.echo(f"Name: {account.username}")
    click.echo(f"Email: {account.email}")
    click.echo(f"Config file: {config_path}")
    click.echo(f"SSH Host: {account.ssh_host}")
    click.echo("\nGit will use these settings in this directory automatically.")


@click.command("config")
@click.argument("directory", required=False, type=click.Path(file_okay=False))
@click.argument("account_name", required=False)
@click.pass_context
def directory_config_cmd(
    ctx: click.Context,
    directory: Optional[str],
    account_name: Optional[str],
) -> None:
    """Use an account for every repository under a directory.

    \b
    Examples:
      krakn config                     # interactive, current directory
      krakn config ~/work work         # ~/work uses the 'work' account
      krakn config . personal          # current directory uses 'personal'
    """
    paths = get_paths(ctx)
    store = load_config(paths.config_path)

    if directory is None:
        if not store.accounts:
            raise UserInputError(
                "No accounts configured. Use 'krakn add' to add accounts first",
            )
        cwd = Path.cwd()
        click.echo(f"Current directory: {cwd}\n")
        labels = [f"{a.name} ({a.email})" for a in store.accounts]
        index = ClickPrompter().choose("Available accounts:", labels)
        _setup_directory(paths, cwd, store.accounts[index])
        return

    if account_name is None:
        raise UserInputError(
            "Provide either no arguments (interactive) or both "
            "DIRECTORY and ACCOUNT_NAME",
        )
    account = require_account(store, account_name)
    _setup_directory(paths, Path(directory).expanduser().absolute(), account)


@click.command("show-includes")
@click.pass_context
def show_includes_cmd(ctx: click.Context) -> None:
    """Show conditional includes in the global git config."""
    paths = get_paths(ctx)
    click.echo("Global Git Configuration:")
    click.echo(f"File: {paths.global_config_file}\n")

    includes = list_conditional_includes(paths.global_config_file)
    click.echo("Conditional Includes:")
    if not includes:
        click.echo("  No conditional includes configured yet")
        click.echo("  Use 'krakn config DIRECTORY ACCOUNT' to create one")
        return
    for include in includes:
        click.echo(f"  {include.gitdir}")
        click.echo(f"    → {include.path}")
