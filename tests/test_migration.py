"""Unit tests for krakn/accounts/migration.py -- first-run import.

Covers:
- skipped when already done or when accounts exist (unless forced)
- nothing discovered marks the store done without prompting
- declining the offer marks the store done
- importing global + SSH candidates, filling gaps interactively
- first imported account becomes current
- invalid account names are asked for again
- select_ssh_key choices
"""

from krakn.accounts import check_and_offer_migration
from krakn.accounts.migration import select_ssh_key
from krakn.config import ConfigStore, load_config, save_config

from conftest import ScriptedPrompter, make_account

SSH_CONFIG = """\
Host github.com-work
  HostName github.com
  User work-gh
  IdentityFile /keys/id_ed25519_gh_work
"""


def _migrate(paths, prompter, force=False):
    return check_and_offer_migration(
        prompter,
        force=force,
        config_path=paths.config_path,
        ssh_dir=paths.ssh_dir,
        ssh_config=paths.ssh_config,
        global_config=paths.global_config,
    )


def _seed(paths, fake_procs):
    paths.ssh_dir.mkdir(parents=True)
    paths.ssh_config.write_text(SSH_CONFIG)
    fake_procs.values[("global", "user.name")] = "Alice"
    fake_procs.values[("global", "user.email")] = "alice@example.com"


# ---------------------------------------------------------------------------
# When migration runs
# ---------------------------------------------------------------------------


def test_skipped_when_done(paths, fake_procs):
    _seed(paths, fake_procs)
    save_config(ConfigStore(migration_done=True), paths.config_path)

    assert _migrate(paths, ScriptedPrompter()) == []
    assert fake_procs.calls == []


def test_skipped_when_accounts_exist(paths, fake_procs):
    _seed(paths, fake_procs)
    save_config(ConfigStore(accounts=[make_account("a")]), paths.config_path)

    assert _migrate(paths, ScriptedPrompter()) == []
    assert load_config(paths.config_path).migration_done is False


def test_nothing_discovered_marks_done(paths, fake_procs):
    prompter = ScriptedPrompter()
    assert _migrate(paths, prompter) == []
    assert prompter.prompts == []
    assert load_config(paths.config_path).migration_done is True


def test_declined_marks_done(paths, fake_procs):
    _seed(paths, fake_procs)
    prompter = ScriptedPrompter([False])

    assert _migrate(paths, prompter) == []
    store = load_config(paths.config_path)
    assert store.migration_done is True
    assert store.accounts == []
    assert any("Global Git Config" in line for line in prompter.echoed)


# ---------------------------------------------------------------------------
# Importing
# ---------------------------------------------------------------------------


def test_import_global_and_ssh_candidates(paths, fake_procs):
    _seed(paths, fake_procs)
    prompter = ScriptedPrompter([
        True,            # import any?
        [0, 1],          # both candidates
        None,            # global: account name -> "default"
        "alice",         # global: username
        "",              # global: no SSH key yet
        None,            # ssh: account name -> "work"
        "w@corp.com",    # ssh: email
    ])

    imported = _migrate(paths, prompter)

    assert [a.name for a in imported] == ["default", "work"]
    default, work = imported
    assert (default.email, default.username, default.ssh_key) == (
        "alice@example.com",
        "alice",
        "",
    )
    assert default.provider.name == "github"
    assert (work.email, work.username) == ("w@corp.com", "work-gh")
    assert work.ssh_key == "/keys/id_ed25519_gh_work"

    store = load_config(paths.config_path)
    assert store.migration_done is True
    assert store.current_account == "default"
    assert [a.name for a in store.accounts] == ["default", "work"]
    assert prompter.answers == []


def test_import_subset_makes_first_current(paths, fake_procs):
    _seed(paths, fake_procs)
    prompter = ScriptedPrompter([True, [1], "job", "w@corp.com"])

    imported = _migrate(paths, prompter)

    assert [a.name for a in imported] == ["job"]
    assert load_config(paths.config_path).current_account == "job"


def test_forced_import_keeps_existing_current(paths, fake_procs):
    _seed(paths, fake_procs)
    store = ConfigStore(accounts=[make_account("a")], current_account="a")
    save_config(store, paths.config_path)

    prompter = ScriptedPrompter([True, [1], None, "w@corp.com"])
    imported = _migrate(paths, prompter, force=True)

    assert [a.name for a in imported] == ["work"]
    store = load_config(paths.config_path)
    assert store.current_account == "a"
    assert [a.name for a in store.accounts] == ["a", "work"]


# ---------------------------------------------------------------------------
# SSH key selection
# ---------------------------------------------------------------------------


def _make_keys(directory, *names):
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text("priv")
        (directory / f"{name}.pub").write_text("pub")


def test_select_ssh_key_existing(tmp_path):
    _make_keys(tmp_path, "id_ed25519_gh_work", "id_rsa")
    prompter = ScriptedPrompter([1])

    assert select_ssh_key(prompter, "work", tmp_path) == str(
        tmp_path / "id_ed25519_gh_work",
    )


def test_select_ssh_key_generate_later(tmp_path):
    _make_keys(tmp_path, "id_rsa")
    assert select_ssh_key(ScriptedPrompter([None]), "work", tmp_path) == ""


def test_select_ssh_key_custom_path(tmp_path):
    _make_keys(tmp_path, "id_rsa")
    real = tmp_path / "elsewhere"
    real.write_text("priv")
    prompter = ScriptedPrompter([2, str(tmp_path / "missing"), str(real)])

    assert select_ssh_key(prompter, "work", tmp_path) == str(real)
    assert any("not found" in line for line in prompter.echoed)


def test_select_ssh_key_no_keys(tmp_path):
    prompter = ScriptedPrompter(["~/some/key"])
    assert select_ssh_key(prompter, "work", tmp_path / "empty") == "~/some/key"
    assert "No existing SSH keys found." in prompter.echoed


def test_import_asks_again_for_invalid_name(paths, fake_procs):
    _seed(paths, fake_procs)
    prompter = ScriptedPrompter([True, [1], "my job", "job", "w@corp.com"])

    imported = _migrate(paths, prompter)

    assert [a.name for a in imported] == ["job"]
    assert "Invalid account name: 'my job'" in prompter.echoed
