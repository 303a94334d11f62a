# -*- coding: utf-8 -*-
"""CLI command and interactive helpers for git hosting providers."""
from __future__ import annotations

import click

from ..constant import DEFAULT_SSH_PORT, DEFAULT_SSH_USER
from ..errors import UserInputError
from ..prompting import Prompter
from ..providers import Provider, list_providers, make_custom_provider


# ---------------------------------------------------------------------------
# Reusable interactive helpers
# ---------------------------------------------------------------------------


def create_custom_provider_interactive(prompter: Prompter) -> Provider:
    """Ask for a self-hosted provider's details and confirm them."""
    prompter.echo("Custom git provider setup")
    hostname = prompter.ask("Hostname (e.g. git.company.com)").strip()
    display_name = prompter.ask("Display name", default=hostname).strip()
    ssh_user = prompter.ask("SSH user", default=DEFAULT_SSH_USER).strip()
    raw_port = prompter.ask("SSH port", default=str(DEFAULT_SSH_PORT)).strip()
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise UserInputError(f"Invalid SSH port: {raw_port!r}") from exc
    web_url = prompter.ask(
        "SSH key management URL",
        default=f"https://{hostname}",
    ).strip()

    provider = make_custom_provider(
        hostname,
        display_name=display_name,
        ssh_user=ssh_user,
        ssh_port=port,
        web_url=web_url,
    )

    prompter.echo("Custom provider configuration:")
    prompter.echo(f"  Name: {provider.display_name}")
    prompter.echo(f"  Hostname: {provider.hostname}")
    prompter.echo(f"  SSH User: {provider.ssh_user}")
    if provider.ssh_port is not None:
        prompter.echo(f"  SSH Port: {provider.ssh_port}")
    prompter.echo(f"  Web URL: {provider.web_url}")
    prompter.echo(f"  Key Suffix: {provider.key_suffix}")

    if not prompter.confirm("Save this configuration?", default=True):
        raise UserInputError("Custom provider configuration cancelled")
    return provider


def select_provider_interactive(prompter: Prompter) -> Provider:
    """Pick a built-in provider or define a custom one."""
    providers = list_providers()
    options = [f"{p.display_name} ({p.hostname})" for p in providers]
    options.append("Custom/Self-hosted (e.g. git.company.com)")
    index = prompter.choose("Select git hosting provider:", options, default=0)
    if index < len(providers):
        return providers[index]
    return create_custom_provider_interactive(prompter)


# ---------------------------------------------------------------------------
# providers
# ---------------------------------------------------------------------------


@click.command("providers")
def providers_cmd() -> None:
    """Show the built-in git hosting providers."""
    click.echo("\n=== Providers ===")
    for provider in list_providers():
        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {provider.display_name} ({provider.name})")
        click.echo(f"{'─' * 44}")
        click.echo(f"  {'hostname':12s}: {provider.hostname}")
        click.echo(f"  {'ssh_user':12s}: {provider.ssh_user}")
        click.echo(f"  {'key_suffix':12s}: {provider.key_suffix}")
        click.echo(f"  {'keys page':12s}: {provider.web_url}")
    click.echo(
        "\nAny other host can be used as a custom provider "
        "(choose 'Custom' when adding an account).",
    )
    click.echo()
