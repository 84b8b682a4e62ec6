#!/usr/bin/env python3
"""Current-branch lookup and display shortening."""
from __future__ import annotations

import logging
from typing import Optional

from git import Repo

from git_operations import BranchLookupError, GitOperations, RepoStatusError

logger = logging.getLogger(__name__)

BRANCH_DISPLAY_LIMIT = 10
BRANCH_KEEP_CHARS = 8


def shorten_branch(name: str) -> str:
    """Cut names longer than BRANCH_DISPLAY_LIMIT down to a fixed-width label ending in '..'."""
    if len(name) > BRANCH_DISPLAY_LIMIT:
        return name[:BRANCH_KEEP_CHARS] + ".."
    return name


def _shorthand(ref: str) -> str:
    for prefix in ("refs/heads/", "refs/remotes/", "refs/tags/"):
        if ref.startswith(prefix):
            return ref.removeprefix(prefix)
    return ref.removeprefix("refs/")


class BranchManager:
    """Resolve the branch HEAD points at."""

    @staticmethod
    def head_shorthand(repo: Repo) -> Optional[str]:
        """Return the unshortened branch name, "HEAD" when detached, or None for an unborn branch.

        Raises BranchLookupError for any other failure reading HEAD.
        """
        try:
            status, stdout, stderr = GitOperations.git_result(repo, ["symbolic-ref", "-q", "HEAD"])
            if status == 0:
                ref = stdout.strip()
                if not GitOperations.git_ok(repo, ["show-ref", "--verify", "--quiet", ref]):
                    # Unborn branch: HEAD names a branch with no commits yet.
                    return None
                return _shorthand(ref)

            if status == 1:
                # Detached HEAD.
                if GitOperations.git_ok(repo, ["rev-parse", "--verify", "--quiet", "HEAD^{commit}"]):
                    return "HEAD"
                raise BranchLookupError(f"detached HEAD in {repo.git_dir} does not point at a commit")

            detail = stderr.strip() or stdout.strip() or f"exit status {status}"
            raise BranchLookupError(f"cannot read HEAD in {repo.git_dir}: {detail}")
        except BranchLookupError:
            raise
        except RepoStatusError as exc:
            raise BranchLookupError(str(exc)) from exc

    @staticmethod
    def current_branch(repo: Repo) -> Optional[str]:
        name = BranchManager.head_shorthand(repo)
        if name is None:
            logger.debug("No current branch in %s", repo.git_dir)
            return None
        return shorten_branch(name)
