# -*- coding: utf-8 -*-
"""CLI commands that switch the active git identity."""
from __future__ import annotations

from typing import Optional

import click

from ..accounts import require_account, set_current
from ..config import Account, load_config, save_config
from ..errors import UserInputError
from ..gitconfig import ConfigScope, set_identity
from .utils import KraknPaths, get_paths


def switch_account(
    paths: KraknPaths,
    name: str,
    scope: ConfigScope,
) -> Account:
    """Write the account's identity at *scope*.

    A global switch also makes it the current account.
    """
    store = load_config(paths.config_path)
    account = require_account(store, name)
    set_identity(
        account.username,
        account.email,
        scope,
        global_config=paths.global_config,
    )
    if scope.is_global:
        set_current(store, name)
        save_config(store, paths.config_path)
    return account


def _echo_switched(account: Account, scope: ConfigScope) -> None:
    click.echo(f"✓ Switched to account '{account.name}' {scope.describe()}")
    click.echo(f"Name: {account.username}")
    click.echo(f"Email: {account.email}")
    click.echo(f"SSH Host: {account.ssh_host}")


# ---------------------------------------------------------------------------
# use
# ---------------------------------------------------------------------------


@click.command("use")
@click.argument("name")
@click.argument(
    "path",
    required=False,
    type=click.Path(file_okay=False),
)
@click.option(
    "--global",
    "-g",
    "global_flag",
    is_flag=True,
    help="Set the global git identity (default when no path is given)",
)
@click.pass_context
def use_cmd(
    ctx: click.Context,
    name: str,
    path: Optional[str],
    global_flag: bool,
) -> None:
    """Switch git identity to an account, globally or for one repository.

    \b
    Examples:
      krakn use personal              # switch globally
      krakn use work ~/my-project     # switch one repository
      krakn use personal --global     # explicitly global
    """
    if path and global_flag:
        raise UserInputError(
            "Cannot specify both a path and --global. Use either "
            f"'krakn use {name} {path}' or 'krakn use {name} --global'",
        )
    scope = ConfigScope.local(path) if path else ConfigScope.global_scope()
    account = switch_account(get_paths(ctx), name, scope)
    _echo_switched(account, scope)

    if scope.is_global:
        click.echo("\nNew repositories will use this account by default.")
    else:
        click.echo("\nTo clone repositories with this account, use:")
        click.echo(f"   git clone {account.clone_url('<owner>/<repo>.git')}")


# ---------------------------------------------------------------------------
# global
# ---------------------------------------------------------------------------


@click.command("global")
@click.argument("name")
@click.pass_context
def global_cmd(ctx: click.Context, name: str) -> None:
    """Set the global git identity to an account."""
    scope = ConfigScope.global_scope()
    account = switch_account(get_paths(ctx), name, scope)
    _echo_switched(account, scope)
    click.echo(
        "\nThis is the default for every repository not covered by a "
        "conditional include.",
    )
