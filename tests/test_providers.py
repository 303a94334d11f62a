"""Unit tests for krakn/providers -- registry, validation, key suffixes.

Covers:
- built-in providers and lookups
- hostname validation
- key-suffix derivation from hostnames
- custom providers and provider detection from SSH host aliases
"""

import pytest
from pydantic import ValidationError

from krakn.errors import InvalidHostnameError
from krakn.providers import (
    Provider,
    derive_key_suffix,
    detect_provider,
    get_provider,
    is_valid_hostname,
    list_providers,
    make_custom_provider,
)


def test_defaults_are_ordered_and_complete():
    names = [p.name for p in list_providers()]
    assert names == ["github", "gitlab", "gitea"]
    github = get_provider("github")
    assert github.hostname == "github.com"
    assert github.ssh_user == "git"
    assert github.key_suffix == "gh"
    assert github.web_url == "https://github.com/settings/ssh/new"


def test_lookup_unknown_returns_none():
    assert get_provider("bitbucket") is None


def test_get_provider_returns_a_copy():
    first = get_provider("gitlab")
    first.hostname = "gitlab.example.com"
    assert get_provider("gitlab").hostname == "gitlab.com"


@pytest.mark.parametrize(
    "hostname, valid",
    [
        ("github.com", True),
        ("git.company-internal.io", True),
        ("localhost", True),
        ("", False),
        ("-bad.com", False),
        ("bad.com.", False),
        ("https://github.com", False),
        ("host:2222", False),
        ("under_score.com", False),
    ],
)
def test_is_valid_hostname(hostname, valid):
    assert is_valid_hostname(hostname) is valid


@pytest.mark.parametrize(
    "hostname, suffix",
    [
        ("git.company.com", "company"),
        ("code.myorg.io", "myorg"),
        ("source.example.org", "example"),
        ("shortdomain", "shortdom"),
        ("a.b", "a"),
        ("verylongcompanyname.com", "verylong"),
        ("abc", "abc"),
    ],
)
def test_derive_key_suffix(hostname, suffix):
    assert derive_key_suffix(hostname) == suffix


def test_make_custom_provider_defaults():
    provider = make_custom_provider("git.company.com")
    assert provider.is_custom
    assert provider.display_name == "git.company.com"
    assert provider.web_url == "https://git.company.com"
    assert provider.key_suffix == "company"
    assert provider.ssh_port is None


def test_make_custom_provider_port_22_is_unset():
    assert make_custom_provider("git.x.io", ssh_port=22).ssh_port is None
    assert make_custom_provider("git.x.io", ssh_port=2222).custom_port == 2222


def test_make_custom_provider_rejects_bad_hostname():
    with pytest.raises(InvalidHostnameError):
        make_custom_provider("not a host")


def test_model_rejects_bad_hostname():
    with pytest.raises(ValidationError):
        Provider(name="custom", hostname="bad host")


def test_model_accepts_legacy_blank_port():
    provider = Provider(name="custom", hostname="git.x.io", ssh_port="")
    assert provider.ssh_port is None


@pytest.mark.parametrize(
    "alias, name, hostname",
    [
        ("github.com-work", "github", "github.com"),
        ("gitlab.com-home", "gitlab", "gitlab.com"),
        ("gitea.com-me", "gitea", "gitea.com"),
        ("git.company.com-work", "custom", "git.company.com"),
    ],
)
def test_detect_provider(alias, name, hostname):
    provider = detect_provider(alias)
    assert provider.name == name
    assert provider.hostname == hostname


def test_detect_provider_without_dash():
    assert detect_provider("example.com") is None
