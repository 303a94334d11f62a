# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("KRAKN_WORKING_DIR", "~/.krakncat"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("KRAKN_CONFIG_FILE", "config.json")

# Current on-disk schema of config.json. Files without a version (or older)
# are read through the legacy adapter in ``config.utils``.
CONFIG_VERSION = 2

SSH_DIR = Path(os.environ.get("KRAKN_SSH_DIR", "~/.ssh")).expanduser()
SSH_CONFIG_FILE = SSH_DIR / "config"

# When set, git is pointed at this file through GIT_CONFIG_GLOBAL so that
# identity writes and includeIf writes land in the same place.
GIT_CONFIG_OVERRIDE = os.environ.get("KRAKN_GIT_CONFIG", "")
GLOBAL_GIT_CONFIG = Path(GIT_CONFIG_OVERRIDE or "~/.gitconfig").expanduser()

# Name of the per-directory config file written by ``krakn config``.
DIRECTORY_CONFIG_NAME = ".gitconfig"

# Env key for log level (read by the CLI root group).
LOG_LEVEL_ENV = "KRAKN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV, "warning")

KEY_ALGORITHM = "ed25519"
DEFAULT_SSH_USER = "git"
DEFAULT_SSH_PORT = 22
