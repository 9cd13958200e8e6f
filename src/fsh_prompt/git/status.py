"""Classification of working tree and index changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pygit2 import GitError as Pygit2GitError
from pygit2.enums import FileStatus

from fsh_prompt.git.utils import GitError

if TYPE_CHECKING:
	from collections.abc import Iterable

	from pygit2.repository import Repository

logger = logging.getLogger(__name__)

WORKTREE_CHANGES = (
	FileStatus.WT_DELETED
	| FileStatus.WT_MODIFIED
	| FileStatus.WT_NEW
	| FileStatus.WT_RENAMED
	| FileStatus.WT_TYPECHANGE
)

INDEX_CHANGES = (
	FileStatus.INDEX_DELETED
	| FileStatus.INDEX_MODIFIED
	| FileStatus.INDEX_NEW
	| FileStatus.INDEX_RENAMED
	| FileStatus.INDEX_TYPECHANGE
)


@dataclass(frozen=True)
class StatusSummary:
	"""Whether the repository has staged and/or unstaged changes."""

	staged: bool = False
	unstaged: bool = False


def classify_statuses(flags: Iterable[int]) -> StatusSummary:
	"""
	Reduce per-file status flags to a staged/unstaged summary.

	A single file may carry flags from both the working tree and the index
	families, in which case it counts towards both.

	Args:
		flags: Status flag values, one per file, in any order

	Returns:
		StatusSummary: The combined summary
	"""
	staged = False
	unstaged = False
	for flag in flags:
		if flag & WORKTREE_CHANGES:
			unstaged = True
		if flag & INDEX_CHANGES:
			staged = True
		if staged and unstaged:
			break
	return StatusSummary(staged=staged, unstaged=unstaged)


def scan_status(repo: Repository) -> StatusSummary:
	"""
	Scan the whole working tree and index of ``repo``.

	Args:
		repo: The repository to scan

	Returns:
		StatusSummary: The combined summary

	Raises:
		GitError: If the status scan fails
	"""
	try:
		statuses = repo.status()
	except Pygit2GitError as e:
		msg = f"Failed to read status of {repo.path}: {e}"
		raise GitError(msg) from e
	logger.debug("Status scan found %d changed paths", len(statuses))
	return classify_statuses(statuses.values())
