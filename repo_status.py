#!/usr/bin/env python3
"""Report whether a path is a git repository and whether its working tree is clean."""
from __future__ import annotations

import argparse
import logging
import sys
import unicodedata
from typing import List, Optional, Sequence

from git_operations import BranchLookupError
from repo_state import RepoSnapshot
from status_checker import RepoStatusChecker

UNKNOWN_BRANCH = "unknown"
ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def quote_path(path: str) -> str:
    """Double-quote path with escapes so it always prints on one line."""
    escaped = []
    for ch in path:
        if ch in ESCAPES:
            escaped.append(ESCAPES[ch])
        elif unicodedata.category(ch) == "Cc":
            escaped.append(f"\\u{{{ord(ch):x}}}")
        else:
            escaped.append(ch)
    return '"' + "".join(escaped) + '"'


def format_report(snapshot: RepoSnapshot) -> List[str]:
    """Status label, then the branch line for an opened repository."""
    lines = [snapshot.status.value]
    if snapshot.is_repository:
        lines.append(f"branch: {snapshot.current_branch or UNKNOWN_BRANCH}")
    return lines


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show whether a git working tree is clean or dirty.")
    parser.add_argument("path", help="Path to the repository root to check")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    args = parse_args(argv)
    print(f"Getting info for {quote_path(args.path)}")
    try:
        snapshot = RepoStatusChecker().check(args.path)
    except BranchLookupError as exc:
        print(f"Error looking up Git branch: {exc}", file=sys.stderr)
        raise SystemExit(1)
    for line in format_report(snapshot):
        print(line)


if __name__ == "__main__":
    main()
