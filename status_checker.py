#!/usr/bin/env python3
"""Repository status check for a single path."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from branch_manager import BranchManager
from git_operations import GitOperations, StatusQueryError
from repo_state import RepoSnapshot
from working_tree_manager import WorkingTreeManager


class RepoStatusChecker:
    """Open a repository at a path and classify its working tree.

    A path that cannot be opened as a repository and a status listing that
    fails both produce RepoSnapshot.missing(); the second is logged. A
    BranchLookupError from the branch lookup is not caught here.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def check(self, path: str | Path) -> RepoSnapshot:
        repo = GitOperations.open_repo(path)
        if repo is None:
            return RepoSnapshot.missing()

        with repo:
            branch = BranchManager.current_branch(repo)
            try:
                entries = WorkingTreeManager.status_entries(repo)
            except StatusQueryError as exc:
                self.logger.error("Error looking up Git statuses: %s", exc)
                return RepoSnapshot.missing()

        return RepoSnapshot(status=WorkingTreeManager.classify(entries), current_branch=branch)
