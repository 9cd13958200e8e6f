"""
Repository state inspection.

Combines the reference resolver, the operation detector and the status
classifier into the ordered version-control segments of the prompt.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fsh_prompt.git.operation import detect_operation
from fsh_prompt.git.reference import resolve_head
from fsh_prompt.git.status import scan_status
from fsh_prompt.prompt.segments import DisplaySegment, Emphasis, PromptGlyphs

if TYPE_CHECKING:
	from pygit2.repository import Repository

logger = logging.getLogger(__name__)


def inspect_repository(repo: Repository | None, glyphs: PromptGlyphs | None = None) -> list[DisplaySegment]:
	"""
	Describe the state of ``repo`` as display segments.

	Args:
		repo: The repository to inspect, or None when not inside one
		glyphs: Symbols to use (defaults to ``PromptGlyphs()``)

	Returns:
		list[DisplaySegment]: The reference segment, followed by the
		operation in progress and the staged/unstaged markers when present.
		Empty when ``repo`` is None.

	Raises:
		GitError: If HEAD cannot be resolved or the status scan fails
	"""
	if repo is None:
		return []
	glyphs = glyphs or PromptGlyphs()

	head = resolve_head(repo)
	segments = [
		DisplaySegment(f"{glyphs.branch} {head.display_name(glyphs.no_head)}", Emphasis.REFERENCE),
	]

	operation = detect_operation(repo.state())
	if operation is not None:
		segments.append(DisplaySegment.plain("performing a"))
		segments.append(DisplaySegment(operation, Emphasis.OPERATION))

	status = scan_status(repo)
	if status.staged:
		segments.append(DisplaySegment(glyphs.staged, Emphasis.POSITIVE))
	if status.unstaged:
		segments.append(DisplaySegment(glyphs.unstaged, Emphasis.NEGATIVE))

	logger.debug("Repository %s: head=%s operation=%s status=%s", repo.path, head, operation, status)
	return segments
