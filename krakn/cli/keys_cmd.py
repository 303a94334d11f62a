# -*- coding: utf-8 -*-
"""CLI command: generate an SSH key for an account."""
from __future__ import annotations

from typing import Optional

import click

from ..accounts import upsert_account, validate_account_name
from ..config import Account, load_config, save_config
from ..errors import UserInputError
from ..prompting import Prompter
from ..providers import (
    CUSTOM_PROVIDER_NAME,
    PROVIDERS,
    Provider,
    get_provider,
    make_custom_provider,
)
from ..ssh import append_host_alias, generate_key_pair, read_public_key
from .providers_cmd import create_custom_provider_interactive
from .utils import ClickPrompter, KraknPaths, get_paths

PROVIDER_CHOICES = [*PROVIDERS, CUSTOM_PROVIDER_NAME]


def resolve_provider(
    prompter: Prompter,
    provider_name: str,
    hostname: Optional[str] = None,
) -> Provider:
    """Turn ``--provider``/``--hostname`` into a Provider."""
    if provider_name == CUSTOM_PROVIDER_NAME:
        if hostname:
            return make_custom_provider(hostname)
        return create_custom_provider_interactive(prompter)
    if hostname:
        raise UserInputError("--hostname is only valid with --provider custom")
    provider = get_provider(provider_name)
    if provider is None:
        raise UserInputError(f"Unknown provider: {provider_name}")
    return provider


def offer_host_alias(
    prompter: Prompter,
    account: Account,
    paths: KraknPaths,
) -> None:
    """Ask, then append the account's host alias to the SSH config."""
    if not prompter.confirm(
        f"Append Host {account.ssh_host} to {paths.ssh_config}?",
        default=True,
    ):
        prompter.echo(f"Skipped modifying {paths.ssh_config}.")
        return
    if append_host_alias(account, paths.ssh_config, paths.ssh_dir):
        prompter.echo("✓ SSH config updated.")
    else:
        prompter.echo(f"Host {account.ssh_host} is already present.")


def create_key_for_account(
    prompter: Prompter,
    account: Account,
    paths: KraknPaths,
) -> None:
    """Generate the account's key pair and show what to do with it."""
    key_path = account.key_path(paths.ssh_dir)
    generate_key_pair(key_path, account.email)
    account.ssh_key = str(key_path)

    offer_host_alias(prompter, account, paths)

    prompter.echo(f"\n✓ SSH key created at: {key_path}")
    prompter.echo(f"\nPublic key:\n{read_public_key(key_path)}")
    if account.provider.web_url:
        prompter.echo(
            f"\nAdd this public key to {account.provider.label}: "
            f"{account.provider.web_url}",
        )
    prompter.echo(f"Host alias for SSH: {account.ssh_host}")


@click.command("generate-key")
@click.option("--name", required=True, help="Unique account name, e.g. work")
@click.option("--email", required=True, help="Email used as the key comment")
@click.option(
    "--provider",
    "provider_name",
    type=click.Choice(PROVIDER_CHOICES),
    default="github",
    show_default=True,
    help="Git hosting provider",
)
@click.option(
    "--hostname",
    default=None,
    help="Hostname of a custom provider, e.g. git.company.com",
)
@click.pass_context
def generate_key_cmd(
    ctx: click.Context,
    name: str,
    email: str,
    provider_name: str,
    hostname: Optional[str],
) -> None:
    """Generate and configure a new SSH key for an account."""
    name = validate_account_name(name)
    paths = get_paths(ctx)
    prompter = ClickPrompter()
    provider = resolve_provider(prompter, provider_name, hostname)

    account = Account(name=name, email=email, provider=provider)
    create_key_for_account(prompter, account, paths)

    if not prompter.confirm(
        "\nSave this as an account configuration?",
        default=True,
    ):
        return
    username = prompter.ask(f"{provider.label} username").strip()
    if not username:
        click.echo("No username given; account not saved.")
        return
    account.username = username

    store = load_config(paths.config_path)
    upsert_account(store, account)
    save_config(store, paths.config_path)
    click.echo(f"✓ Account '{name}' saved to configuration!")
