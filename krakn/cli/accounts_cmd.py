# -*- coding: utf-8 -*-
"""CLI commands for adding, listing and removing accounts."""
from __future__ import annotations

from typing import Optional

import click

from ..accounts import (
    get_current_account,
    remove_account,
    require_account,
    upsert_account,
    validate_account_name,
)
from ..config import Account, load_config, save_config
from ..errors import UserInputError
from ..gitconfig import ConfigScope, get_identity
from ..ssh import delete_key_pair
from .keys_cmd import create_key_for_account, offer_host_alias
from .providers_cmd import select_provider_interactive
from .utils import ClickPrompter, get_paths, prompt_path


def _require_text(value: str, what: str) -> str:
    value = value.strip()
    if not value:
        raise UserInputError(f"{what} cannot be empty")
    return value


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


@click.command("add")
@click.pass_context
def add_cmd(ctx: click.Context) -> None:
    """Add an account (interactive)."""
    paths = get_paths(ctx)
    prompter = ClickPrompter()

    name = validate_account_name(
        _require_text(
            prompter.ask("Account name (e.g. 'work', 'personal')"),
            "Account name",
        ),
    )
    email = _require_text(prompter.ask("Email address"), "Email")
    provider = select_provider_interactive(prompter)
    username = _require_text(
        prompter.ask(f"{provider.label} username"),
        "Username",
    )

    account = Account(
        name=name,
        email=email,
        username=username,
        provider=provider,
    )
    default_key = account.default_key_path(paths.ssh_dir)
    account.ssh_key = prompt_path("SSH key path", default=str(default_key))

    if account.key_path(paths.ssh_dir).exists():
        offer_host_alias(prompter, account, paths)
    else:
        click.echo(f"SSH key not found at {account.ssh_key}")
        if not prompter.confirm("Generate it now?", default=True):
            raise UserInputError("Cannot add account without SSH key")
        create_key_for_account(prompter, account, paths)

    store = load_config(paths.config_path)
    replaced = upsert_account(store, account)
    save_config(store, paths.config_path)

    verb = "updated" if replaced else "added"
    click.echo(f"✓ Account '{name}' {verb} successfully!")
    click.echo(f"SSH Host: {account.ssh_host}")
    click.echo(f"Config saved to: {paths.config_path}")


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


def _echo_identity(title: str, name: str, email: str) -> None:
    click.echo(title)
    if name:
        click.echo(f"   Name: {name}")
    else:
        click.echo("   (no user.name configured)")
    if email:
        click.echo(f"   Email: {email}")


@click.command("list")
@click.option(
    "--global",
    "-g",
    "global_only",
    is_flag=True,
    help="Show only the global git identity",
)
@click.pass_context
def list_cmd(ctx: click.Context, global_only: bool) -> None:
    """List configured accounts and the active git identity."""
    paths = get_paths(ctx)
    global_identity = get_identity(
        ConfigScope.global_scope(),
        global_config=paths.global_config,
    )
    if global_only:
        _echo_identity("Global Git Configuration:", *global_identity)
        return

    store = load_config(paths.config_path)
    if not store.accounts:
        click.echo("No accounts configured yet.")
        click.echo("Use 'krakn add' to add your first account.")
        return

    current = get_current_account(store)
    click.echo("Configured accounts:\n")
    for account in store.accounts:
        status = " (current)" if current is account else ""
        click.echo(click.style(f"{account.name}{status}", bold=True))
        click.echo(f"   Email: {account.email}")
        click.echo(f"   SSH Key: {account.ssh_key or '(not generated)'}")
        click.echo(f"   {account.provider.label}: @{account.username}")
        click.echo(f"   SSH Host: {account.ssh_host}")
        click.echo()

    _echo_identity(
        "Current Git Configuration:",
        *get_identity(global_config=paths.global_config),
    )
    _echo_identity("\nGlobal Git Configuration:", *global_identity)


# ---------------------------------------------------------------------------
# remove
# ---------------------------------------------------------------------------


@click.command("remove")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.option(
    "--delete-keys/--keep-keys",
    default=None,
    help="Delete or keep the SSH key files (asks when omitted)",
)
@click.pass_context
def remove_cmd(
    ctx: click.Context,
    name: str,
    yes: bool,
    delete_keys: Optional[bool],
) -> None:
    """Remove an account configuration."""
    paths = get_paths(ctx)
    store = load_config(paths.config_path)
    require_account(store, name)

    if not yes and not click.confirm(
        f"Are you sure you want to remove account '{name}'?",
        default=False,
    ):
        click.echo("Account removal cancelled")
        return

    previous_current = store.current_account
    account = remove_account(store, name)
    save_config(store, paths.config_path)
    click.echo(f"✓ Account '{name}' removed")
    if previous_current == name:
        if store.current_account:
            click.echo(f"Current account switched to '{store.current_account}'")
        else:
            click.echo("No accounts remaining")

    if account.ssh_key:
        if delete_keys is None:
            click.echo(f"\nSSH key still exists at: {account.ssh_key}")
            delete_keys = click.confirm(
                "Remove the SSH key files?",
                default=False,
            )
        if delete_keys:
            for removed in delete_key_pair(account.ssh_key):
                click.echo(f"Removed: {removed}")

    click.echo("\nYou may also want to:")
    if account.provider.web_url:
        click.echo(
            f"   - Remove the key from {account.provider.label}: "
            f"{account.provider.web_url}",
        )
    click.echo(f"   - Remove 'Host {account.ssh_host}' from {paths.ssh_config}")
    click.echo(
        f"   - Clean up conditional includes in {paths.global_config_file}",
    )
