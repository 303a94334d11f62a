"""Unit tests for krakn/config -- loading and saving config.json.

Covers:
- missing file yields an empty store
- save/load round-trip keeps account order and current_account
- legacy (single-provider) files are upgraded with GitHub embedded
- dangling current_account is cleared on load
- malformed files raise ConfigIOError instead of being reset
"""

import json

import pytest

from krakn.config import ConfigStore, load_config, save_config
from krakn.constant import CONFIG_VERSION
from krakn.errors import ConfigIOError

from conftest import make_account


def test_missing_file_is_empty_store(tmp_path):
    store = load_config(tmp_path / "nope.json")
    assert store.accounts == []
    assert store.current_account == ""
    assert store.migration_done is False
    assert store.config_version == CONFIG_VERSION


def test_round_trip_preserves_order_and_current(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    store = ConfigStore(
        accounts=[
            make_account("zeta"),
            make_account("alpha", provider="gitlab"),
            make_account("mid", provider="gitea", ssh_key="/k/mid"),
        ],
        current_account="alpha",
        migration_done=True,
    )
    save_config(store, path)
    loaded = load_config(path)

    assert [a.name for a in loaded.accounts] == ["zeta", "alpha", "mid"]
    assert loaded.current_account == "alpha"
    assert loaded.migration_done is True
    assert loaded.accounts[1].provider.hostname == "gitlab.com"
    assert loaded.accounts[2].ssh_key == "/k/mid"
    assert loaded == store


def test_save_derives_is_default_flags(tmp_path):
    path = tmp_path / "config.json"
    store = ConfigStore(
        accounts=[make_account("a", is_default=True), make_account("b")],
        current_account="b",
    )
    save_config(store, path)

    raw = json.loads(path.read_text())
    assert [a["is_default"] for a in raw["accounts"]] == [False, True]
    assert raw["config_version"] == CONFIG_VERSION
    assert raw["accounts"][0]["provider"]["key_suffix"] == "gh"


def test_save_leaves_no_temp_files(tmp_path):
    path = tmp_path / "config.json"
    save_config(ConfigStore(), path)
    save_config(ConfigStore(migration_done=True), path)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["config.json"]


def test_legacy_format_is_upgraded(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "accounts": [
                    {
                        "name": "work",
                        "email": "w@corp.com",
                        "ssh_key": "/home/u/.ssh/id_ed25519_gh_work",
                        "username": "wuser",
                        "is_default": True,
                    },
                ],
                "current_account": "work",
                "migration_done": True,
            },
        ),
    )
    store = load_config(path)

    assert store.config_version == CONFIG_VERSION
    assert store.current_account == "work"
    account = store.accounts[0]
    assert account.provider.name == "github"
    assert account.ssh_host == "github.com-work"
    assert account.ssh_key == "/home/u/.ssh/id_ed25519_gh_work"


def test_dangling_current_account_is_cleared(tmp_path):
    path = tmp_path / "config.json"
    store = ConfigStore(accounts=[make_account("real")], current_account="ghost")
    save_config(store, path)

    assert load_config(path).current_account == ""


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"config_version": 2, "accounts": [{"email": "x"}]}),
    ],
)
def test_malformed_file_raises(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ConfigIOError):
        load_config(path)
    # The broken file is left for the user to inspect.
    assert path.read_text() == content
