#!/usr/bin/env python3
"""Git helpers shared by the status checker and its CLI."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from git import Git, Repo
from git.exc import GitCommandError, GitCommandNotFound, GitError

logger = logging.getLogger(__name__)

# Read-only queries must not refresh or lock the index.
READ_ONLY_ENV = {"GIT_OPTIONAL_LOCKS": "0"}


class RepoStatusError(Exception):
    """Raised for recoverable repo-status errors."""


class BranchLookupError(RepoStatusError):
    """Raised when HEAD cannot be resolved for a reason other than an unborn branch."""


class StatusQueryError(RepoStatusError):
    """Raised when the working-tree status cannot be listed."""


class GitOperations:
    """Thin wrappers around GitPython repository access."""

    @staticmethod
    def open_repo(path: str | Path) -> Optional[Repo]:
        """Open the repository rooted at path, or return None when there is none."""
        try:
            repo = Repo(path)
        except (GitError, OSError, ValueError) as exc:
            logger.debug("No repository at %s: %s", path, exc)
            return None

        # Repo() does not apply git's ownership and permission checks; git itself must accept it.
        try:
            usable = GitOperations.git_ok(repo, ["rev-parse", "--git-dir"])
        except RepoStatusError as exc:
            logger.debug("Repository at %s is unusable: %s", path, exc)
            usable = False
        if not usable:
            logger.debug("git refused repository at %s", path)
            repo.close()
            return None
        return repo

    @staticmethod
    def run_git(repo: Repo, args: Sequence[str]) -> str:
        """Run a git command and return stdout; raise on failure."""
        status, stdout, stderr = GitOperations.git_result(repo, args)
        if status != 0:
            detail = stderr.strip() or stdout.strip()
            raise RepoStatusError(f"git {' '.join(args)} failed in {repo.working_dir}: {detail}")
        return stdout

    @staticmethod
    def git_result(repo: Repo, args: Sequence[str]) -> tuple[int, str, str]:
        """Run a git command and return (status, stdout, stderr) without raising on exit status."""
        try:
            return repo.git.execute(
                [Git.GIT_PYTHON_GIT_EXECUTABLE, *args],
                with_extended_output=True,
                with_exceptions=False,
                env=READ_ONLY_ENV,
            )
        except GitCommandNotFound as exc:
            raise RepoStatusError(f"git executable not found: {exc}") from exc
        except GitCommandError as exc:
            raise RepoStatusError(f"git {' '.join(args)} failed in {repo.working_dir}: {exc}") from exc

    @staticmethod
    def git_ok(repo: Repo, args: Sequence[str]) -> bool:
        """Return True when git exits with status 0."""
        status, _, _ = GitOperations.git_result(repo, args)
        return status == 0
