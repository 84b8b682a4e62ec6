#!/usr/bin/env python3
"""Working tree status listing and clean/dirty classification."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from git import Repo

from git_operations import GitOperations, RepoStatusError, StatusQueryError
from repo_state import RepoStatus

STATUS_ARGS = ["status", "--porcelain=v1", "-z", "--ignored", "--untracked-files=all"]


@dataclass(frozen=True)
class StatusEntry:
    """One record from `git status --porcelain`."""

    path: str
    index: str
    worktree: str
    original_path: Optional[str] = None

    @property
    def is_ignored(self) -> bool:
        return self.index == "!" and self.worktree == "!"


def parse_porcelain(output: str) -> List[StatusEntry]:
    """Parse NUL-separated porcelain v1 output.

    Rename and copy records are followed by an extra field holding the source path.
    """
    entries: List[StatusEntry] = []
    fields = iter(output.split("\0"))
    for record in fields:
        if not record:
            continue
        if len(record) < 4 or record[2] != " ":
            raise StatusQueryError(f"unexpected status record: {record!r}")
        index, worktree, path = record[0], record[1], record[3:]
        original = None
        if index in "RC" or worktree in "RC":
            original = next(fields, None)
        entries.append(StatusEntry(path=path, index=index, worktree=worktree, original_path=original))
    return entries


class WorkingTreeManager:
    """Helpers for listing status entries and checking cleanliness."""

    @staticmethod
    def status_entries(repo: Repo) -> List[StatusEntry]:
        try:
            out = GitOperations.run_git(repo, STATUS_ARGS)
        except RepoStatusError as exc:
            raise StatusQueryError(str(exc)) from exc
        return parse_porcelain(out)

    @staticmethod
    def classify(entries: Iterable[StatusEntry]) -> RepoStatus:
        if any(not entry.is_ignored for entry in entries):
            return RepoStatus.DIRTY
        return RepoStatus.CLEAN
