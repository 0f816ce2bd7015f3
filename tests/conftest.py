"""Shared pytest fixtures for pkgskeleton tests."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from gitutil import FakeLookup, git


@pytest.fixture(autouse=True)
def isolated_git(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch):
    """Point git at an empty global config so tests never see the user's settings."""
    home = tmp_path_factory.mktemp("home")
    global_config = home / ".gitconfig"
    global_config.write_text("")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Joe H. User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@email.domain")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Joe H. User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@email.domain")
    monkeypatch.delenv("PKGSKELETON_CONFIG", raising=False)
    monkeypatch.delenv("PKGSKELETON_LOG_LEVEL", raising=False)
    monkeypatch.chdir(home)
    return global_config


@pytest.fixture
def git_identity(isolated_git: Path) -> dict[str, str]:
    """Set the git options used for placeholder defaults."""
    identity = {
        "user.name": "Joe H. User",
        "user.email": "test@email.domain",
        "github.user": "somethingclever",
    }
    for option, value in identity.items():
        subprocess.run(
            ["git", "config", "--global", option, value], check=True, capture_output=True
        )
    return identity


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Create an empty git repository."""
    path = tmp_path / "repo"
    path.mkdir()
    git(path, "init")
    return path


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Create a small template with placeholders in paths and contents."""
    root = tmp_path / "template"
    (root / "{PKGNAME}").mkdir(parents=True)
    (root / "{PKGNAME}" / "a.md").write_text("hello {PKGNAME}")
    (root / "README.md").write_text("# {PKGNAME}\n\nby {USERNAME}\n")
    (root / "docs").mkdir()
    (root / "docs" / "index.md").write_text("{PKGNAME} docs ({YEAR})\n")
    return root


@pytest.fixture
def lookup() -> FakeLookup:
    return FakeLookup(
        {
            "user.name": "Some O. N.",
            "user.email": "foo@bar.baz",
            "github.user": "someone",
        }
    )
