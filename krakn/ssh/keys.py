# -*- coding: utf-8 -*-
"""SSH key pairs: generation through ssh-keygen, listing and removal."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from ..constant import KEY_ALGORITHM, SSH_DIR
from ..errors import (
    AlreadyExistsError,
    ConfigIOError,
    KeyGenerationFailedError,
    KeyNotFoundError,
)

logger = logging.getLogger(__name__)

PUBLIC_KEY_SUFFIX = ".pub"


def public_key_path(path: Union[str, Path]) -> Path:
    return Path(f"{path}{PUBLIC_KEY_SUFFIX}")


def ensure_private_dir(directory: Path) -> None:
    """Create *directory* (mode 0700) if it does not exist yet."""
    if directory.is_dir():
        return
    try:
        directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigIOError("create directory", directory, exc) from exc
    logger.debug("Created %s", directory)


def generate_key_pair(path: Union[str, Path], comment: str) -> Path:
    """Generate an Ed25519 key pair with no passphrase at *path*.

    Returns the path of the public key (``<path>.pub``).
    """
    path = Path(path).expanduser()
    if path.exists():
        raise AlreadyExistsError(path)
    ensure_private_dir(path.parent)

    argv = [
        "ssh-keygen",
        "-t",
        KEY_ALGORITHM,
        "-C",
        comment,
        "-f",
        str(path),
        "-q",
        "-N",
        "",
    ]
    logger.debug("Running %s", argv)
    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.error("Could not start ssh-keygen: %s", exc)
        raise KeyGenerationFailedError(argv) from exc
    if result.returncode != 0:
        raise KeyGenerationFailedError(argv, result.returncode, result.stderr)

    logger.info("Generated SSH key %s", path)
    return public_key_path(path)


def read_public_key(path: Union[str, Path]) -> str:
    """Return the public key text for the private key at *path*."""
    pub = public_key_path(Path(path).expanduser())
    try:
        return pub.read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        raise KeyNotFoundError(pub) from exc
    except OSError as exc:
        raise ConfigIOError("read", pub, exc) from exc


def list_existing_keys(directory: Optional[Path] = None) -> List[str]:
    """Return private key filenames in *directory*.

    A file counts as a private key when it is not a ``.pub`` file and a
    ``<name>.pub`` sibling exists.
    """
    directory = directory if directory is not None else SSH_DIR
    try:
        entries = sorted(os.listdir(directory))
    except OSError:
        return []
    names = set(entries)
    return [
        name
        for name in entries
        if not name.endswith(PUBLIC_KEY_SUFFIX)
        and f"{name}{PUBLIC_KEY_SUFFIX}" in names
        and (Path(directory) / name).is_file()
    ]


def delete_key_pair(path: Union[str, Path]) -> List[Path]:
    """Delete the private and public key; returns what was removed."""
    path = Path(path).expanduser()
    removed = []
    for target in (path, public_key_path(path)):
        try:
            target.unlink()
        except FileNotFoundError:
            logger.debug("Key file %s already absent", target)
            continue
        except OSError as exc:
            raise ConfigIOError("remove", target, exc) from exc
        removed.append(target)
        logger.info("Removed %s", target)
    return removed
