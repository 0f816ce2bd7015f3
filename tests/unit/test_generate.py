"""End-to-end tests for package generation."""

from pathlib import Path

import pytest
from gitutil import FakeLookup, commit_all, git, requires_git

from pkgskeleton.core.config import SkeletonConfig
from pkgskeleton.core.errors import (
    InvalidTargetError,
    MissingValueError,
    NotARepositoryError,
    TemplateNotFoundError,
)
from pkgskeleton.core.generate import generate
from pkgskeleton.core.git import is_repository

pytestmark = requires_git


def check_dest_dir(pkg_name: str, dest_dir: Path) -> None:
    readme = dest_dir / "README.md"
    assert readme.is_file()
    assert pkg_name in readme.read_text()
    assert (dest_dir / "src" / f"{pkg_name}.jl").is_file()
    assert "{PKGNAME}" not in (dest_dir / "docs" / "make.jl").read_text()


def test_generate_default_template(tmp_path: Path, lookup: FakeLookup):
    dest_dir = tmp_path / "Foo.jl"
    messages: list[str] = []

    result = generate(dest_dir, lookup=lookup, progress_callback=messages.append)

    check_dest_dir("Foo", dest_dir)
    assert is_repository(dest_dir)
    assert result.package_name == "Foo"
    assert result.report.files_written == len(result.reconciliation.clean) > 0
    assert "someone/Foo.jl" in (dest_dir / "README.md").read_text()
    assert any("Foo" in msg for msg in messages)


def test_regenerate_is_idempotent(tmp_path: Path, lookup: FakeLookup):
    dest_dir = tmp_path / "Foo"
    replacements = {"UUID": "00000000-0000-0000-0000-000000000000"}
    generate(dest_dir, replacements=replacements, lookup=lookup)

    result = generate(dest_dir, replacements=replacements, lookup=lookup)

    assert result.report.files_written == 0
    assert len(result.report.unchanged) == len(result.reconciliation)


def test_uncommitted_changes_are_kept(tmp_path: Path, lookup: FakeLookup):
    dest_dir = tmp_path / "Foo"
    generate(dest_dir, replacements={"UUID": "1"}, lookup=lookup)
    commit_all(dest_dir)
    (dest_dir / "README.md").write_text("my own readme\n")

    result = generate(dest_dir, replacements={"UUID": "2"}, lookup=lookup)

    assert (dest_dir / "README.md").read_text() == "my own readme\n"
    assert result.report.skipped_dirty == ["README.md"]
    assert 'uuid = "2"' in (dest_dir / "Project.toml").read_text()

    generate(dest_dir, replacements={"UUID": "2"}, lookup=lookup, overwrite_uncommitted=True)
    assert "Foo" in (dest_dir / "README.md").read_text()


def test_custom_template_and_config(tmp_path: Path, template_dir: Path):
    config = SkeletonConfig(
        values={"USERNAME": "Configured", "USEREMAIL": "c@d.e", "GHUSER": "configured"}
    )
    dest_dir = tmp_path / "Bar"

    result = generate(dest_dir, template=template_dir, config=config, lookup=FakeLookup())

    assert (dest_dir / "Bar" / "a.md").read_text() == "hello Bar"
    assert "by Configured" in (dest_dir / "README.md").read_text()
    assert result.template_dir == template_dir.resolve()


def test_destination_is_a_file(tmp_path: Path, lookup: FakeLookup):
    dest = tmp_path / "Foo"
    dest.write_text("")
    with pytest.raises(InvalidTargetError):
        generate(dest, lookup=lookup)


def test_no_git_init(tmp_path: Path, lookup: FakeLookup):
    dest = tmp_path / "Foo"
    dest.mkdir()
    with pytest.raises(NotARepositoryError):
        generate(dest, lookup=lookup, git_init=False)
    assert list(dest.iterdir()) == []


def test_missing_value_writes_nothing(tmp_path: Path):
    dest = tmp_path / "Foo"
    with pytest.raises(MissingValueError):
        generate(dest, lookup=FakeLookup())
    assert not dest.exists()


def test_unknown_template(tmp_path: Path, lookup: FakeLookup):
    with pytest.raises(TemplateNotFoundError):
        generate(tmp_path / "Foo", template="nonexistent", lookup=lookup)


def test_generate_into_current_directory(
    tmp_path: Path, lookup: FakeLookup, monkeypatch: pytest.MonkeyPatch
):
    dest_dir = tmp_path / "Foo.jl"
    dest_dir.mkdir()
    monkeypatch.chdir(dest_dir)

    result = generate(".", lookup=lookup)

    assert result.package_name == "Foo"
    assert result.target_dir == dest_dir.resolve()
    check_dest_dir("Foo", dest_dir)


def test_template_git_directory_is_not_copied(
    tmp_path: Path, template_dir: Path, lookup: FakeLookup
):
    git(template_dir, "init")
    commit_all(template_dir)
    dest_dir = tmp_path / "Bar"
    dest_dir.mkdir()
    git(dest_dir, "init")
    (dest_dir / "keep.txt").write_text("keep")
    commit_all(dest_dir)
    head = git(dest_dir, "rev-parse", "HEAD")

    result = generate(dest_dir, template=template_dir, lookup=lookup)

    paths = [entry.path for entry in result.reconciliation.clean]
    assert paths == ["Bar/a.md", "README.md", "docs/index.md"]
    assert git(dest_dir, "rev-parse", "HEAD") == head
    assert git(dest_dir, "ls-files").split() == ["keep.txt"]
