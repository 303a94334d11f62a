# -*- coding: utf-8 -*-
"""git configuration: identity, directory configs, conditional includes."""

from .runner import get_config_value, set_config_value
from .writer import (
    ConditionalInclude,
    ConfigScope,
    add_conditional_include,
    configure_directory,
    directory_config_path,
    get_identity,
    is_git_repository,
    list_conditional_includes,
    normalize_gitdir,
    set_identity,
    write_directory_config,
)

__all__ = [
    # runner
    "get_config_value",
    "set_config_value",
    # writer
    "ConditionalInclude",
    "ConfigScope",
    "add_conditional_include",
    "configure_directory",
    "directory_config_path",
    "get_identity",
    "is_git_repository",
    "list_conditional_includes",
    "normalize_gitdir",
    "set_identity",
    "write_directory_config",
]
