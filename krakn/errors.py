# -*- coding: utf-8 -*-
"""Exception types raised by krakn.

Every error derives from :class:`KraknError`, a ``click.ClickException``,
so the command layer reports it as a one-line message and exits with
status 1.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from click import ClickException


class KraknError(ClickException):
    """Base exception for all user-facing krakn errors.

    Subclasses may set ``user_help_text`` to a hint that is appended to
    the message when the CLI prints it.
    """

    user_help_text: Optional[str] = None

    def format_message(self) -> str:
        if self.user_help_text:
            return f"{self.message}  [{self.user_help_text}]"
        return self.message


class UserInputError(KraknError):
    """Raised when interactive or command-line input is unusable."""


class InvalidHostnameError(UserInputError, ValueError):
    """Raised when a custom provider hostname fails validation."""

    def __init__(self, hostname: str) -> None:
        self.hostname = hostname
        super().__init__(f"Invalid hostname format: {hostname!r}")


class NotFoundError(KraknError):
    """Raised when an account or a file is absent."""


class AccountNotFoundError(NotFoundError):
    """Raised when no account has the requested name."""

    def __init__(self, name: str, available: Sequence[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        if self.available:
            message = (
                f"Account '{name}' not found. "
                f"Available accounts: {', '.join(self.available)}"
            )
        else:
            message = f"Account '{name}' not found."
            self.user_help_text = (
                "No accounts configured. Use 'krakn add' to add one first."
            )
        super().__init__(message)


class KeyNotFoundError(NotFoundError):
    """Raised when an SSH key file is missing."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"SSH key not found at {self.path}")


class AlreadyExistsError(KraknError):
    """Raised when a key generation target is already occupied."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"SSH key already exists at {self.path}")


class NotARepositoryError(KraknError):
    """Raised when a local git scope targets a path without ``.git``."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"'{self.path}' is not a git repository")


class ExternalCommandError(KraknError):
    """Base for failures of an external program (non-zero exit or launch).

    ``missing_program_hint`` becomes the help text only when the program
    could not be started.
    """

    missing_program_hint: Optional[str] = None

    def __init__(
        self,
        argv: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr.strip()
        if returncode is None:
            detail = "could not be started"
            self.user_help_text = self.missing_program_hint
        else:
            detail = f"exited with status {returncode}"
        message = f"`{' '.join(self.argv)}` {detail}"
        if self.stderr:
            message += f": {self.stderr}"
        super().__init__(message)


class GitCommandFailedError(ExternalCommandError):
    """Raised when a ``git config`` invocation fails."""

    missing_program_hint = "Is git installed and on PATH?"


class KeyGenerationFailedError(ExternalCommandError):
    """Raised when ``ssh-keygen`` fails."""

    missing_program_hint = "Is OpenSSH (ssh-keygen) installed and on PATH?"


class ConfigIOError(KraknError):
    """Raised when a config file or directory cannot be read or written."""

    def __init__(self, action: str, path: Union[str, Path], reason: object):
        self.path = Path(path)
        super().__init__(f"Failed to {action} {self.path}: {reason}")
