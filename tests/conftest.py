"""Fixtures that build throw-away git repositories."""

import os
import subprocess
from pathlib import Path

import pytest


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test User",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=str(repo),
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def empty_repo(tmp_path):
    """Freshly initialised repository on an unborn `main` branch."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    git(repo_path, "init", "-q")
    git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    return repo_path


@pytest.fixture
def committed_repo(empty_repo):
    """Repository with one commit and an ignore rule for *.log files."""
    (empty_repo / "README.md").write_text("hello\n")
    (empty_repo / ".gitignore").write_text("*.log\nbuild/\n")
    git(empty_repo, "add", "README.md", ".gitignore")
    git(empty_repo, "commit", "-q", "-m", "initial")
    return empty_repo


@pytest.fixture(autouse=True)
def isolated_git_config(monkeypatch):
    """Keep the caller's global excludes and config out of the checks."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
