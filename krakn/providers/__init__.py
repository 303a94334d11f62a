# -*- coding: utf-8 -*-
"""Git hosting providers: model and registry."""

from .models import CUSTOM_PROVIDER_NAME, Provider
from .registry import (
    DEFAULT_PROVIDER,
    PROVIDERS,
    derive_key_suffix,
    detect_provider,
    find_provider_by_hostname,
    get_provider,
    is_valid_hostname,
    list_providers,
    make_custom_provider,
)

__all__ = [
    # models
    "CUSTOM_PROVIDER_NAME",
    "Provider",
    # registry
    "DEFAULT_PROVIDER",
    "PROVIDERS",
    "derive_key_suffix",
    "detect_provider",
    "find_provider_by_hostname",
    "get_provider",
    "is_valid_hostname",
    "list_providers",
    "make_custom_provider",
]
