#!/usr/bin/env python3
"""Shared repository status model."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RepoStatus(Enum):
    NO_REPOSITORY = "not a repository"
    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True)
class RepoSnapshot:
    """Result of a single status check; branch is only set when a repository was opened."""

    status: RepoStatus
    current_branch: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status is RepoStatus.NO_REPOSITORY and self.current_branch is not None:
            raise ValueError("a missing repository cannot carry a branch")

    @classmethod
    def missing(cls) -> "RepoSnapshot":
        return cls(status=RepoStatus.NO_REPOSITORY)

    @property
    def is_repository(self) -> bool:
        return self.status is not RepoStatus.NO_REPOSITORY
