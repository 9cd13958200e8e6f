"""Git utilities for fsh-prompt."""

from __future__ import annotations

import logging
from pathlib import Path

from pygit2 import GitError as Pygit2GitError
from pygit2 import discover_repository
from pygit2.repository import Repository

logger = logging.getLogger(__name__)


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def find_git_dir(path: Path | None = None) -> Path | None:
	"""
	Find the git directory of the repository containing ``path``.

	Walks upward from ``path`` (the current directory by default) the way
	``git`` itself does.

	Args:
		path: Directory to start searching from

	Returns:
		Path to the ``.git`` directory, or None when not inside a repository

	Raises:
		GitError: If the search itself fails
	"""
	try:
		git_dir = discover_repository(str(path or Path.cwd()))
	except Pygit2GitError as e:
		msg = f"Failed to search for a git repository above {path}: {e}"
		raise GitError(msg) from e
	if git_dir is None:
		logger.debug("No git repository found above %s", path or Path.cwd())
		return None
	return Path(git_dir)


def open_repository(path: Path | None = None) -> Repository | None:
	"""
	Open the repository containing ``path``.

	Args:
		path: Directory to start searching from

	Returns:
		The opened repository, or None when not inside a repository

	Raises:
		GitError: If a repository was found but could not be opened
	"""
	git_dir = find_git_dir(path)
	if git_dir is None:
		return None
	try:
		return Repository(str(git_dir))
	except Pygit2GitError as e:
		msg = f"Failed to open git repository at {git_dir}: {e}"
		raise GitError(msg) from e
