# -*- coding: utf-8 -*-
from .config import Account, ConfigStore
from .utils import get_config_path, load_config, save_config

__all__ = [
    "Account",
    "ConfigStore",
    "get_config_path",
    "load_config",
    "save_config",
]
