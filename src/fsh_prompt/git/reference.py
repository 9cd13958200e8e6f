"""
Resolution of the current position in history.

pygit2 reports an unborn branch (configured as current but without any
commit yet) as a failure to resolve HEAD. It is a normal repository state
for the prompt, so the resolver turns every outcome into a ``HeadReference``
and callers branch on its ``kind`` instead of on error codes.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pygit2 import GitError as Pygit2GitError

from fsh_prompt.git.utils import GitError

if TYPE_CHECKING:
	from pygit2.repository import Repository

logger = logging.getLogger(__name__)


class ReferenceKind(Enum):
	"""How HEAD was resolved."""

	RESOLVED = "resolved"
	ABSENT = "absent"
	UNBORN = "unborn"


@dataclass(frozen=True)
class HeadReference:
	"""The outcome of resolving HEAD."""

	kind: ReferenceKind
	name: str | None = None

	def display_name(self, placeholder: str) -> str:
		"""Return the reference name, or ``placeholder`` when there is none."""
		return self.name if self.name is not None else placeholder


def read_head_file(git_dir: Path) -> str:
	"""
	Read the branch name HEAD points at straight from the HEAD file.

	Only the last path segment of the ref is kept, so
	``ref: refs/heads/my-feature`` yields ``my-feature``.

	Args:
		git_dir: Path to the repository's git directory

	Returns:
		str: The branch name

	Raises:
		GitError: If the file cannot be read or is empty
	"""
	head_path = git_dir / "HEAD"
	try:
		content = head_path.read_bytes().decode("utf-8")
	except (OSError, UnicodeDecodeError) as e:
		msg = f"Failed to read {head_path}: {e}"
		raise GitError(msg) from e

	if not content:
		msg = f"{head_path} is empty"
		raise GitError(msg)
	first_line = content.split("\n", 1)[0]
	return first_line.strip().split("/")[-1]


def resolve_head(repo: Repository) -> HeadReference:
	"""
	Resolve HEAD of ``repo`` to a short display name.

	Args:
		repo: The repository to inspect

	Returns:
		HeadReference: The resolved, absent or unborn reference

	Raises:
		GitError: If HEAD cannot be looked up, or if the HEAD file of an
			unborn branch cannot be read
	"""
	try:
		if repo.head_is_unborn:
			name = read_head_file(Path(repo.path))
			logger.debug("HEAD is unborn, pointing at %s", name)
			return HeadReference(ReferenceKind.UNBORN, name)
		return HeadReference(ReferenceKind.RESOLVED, repo.head.shorthand)
	except Pygit2GitError as e:
		if not _has_head_reference(repo):
			logger.debug("HEAD of %s not found", repo.path)
			return HeadReference(ReferenceKind.ABSENT)
		msg = f"Failed to resolve HEAD of {repo.path}: {e}"
		raise GitError(msg) from e


def _has_head_reference(repo: Repository) -> bool:
	"""Return False when the HEAD reference itself is missing."""
	try:
		return repo.references.get("HEAD") is not None
	except Pygit2GitError:
		return True
