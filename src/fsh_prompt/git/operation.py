"""Detection of in-progress multi-step git operations."""

from __future__ import annotations

from pygit2.enums import RepositoryState

OPERATION_LABELS: dict[RepositoryState, str] = {
	RepositoryState.MERGE: "merge",
	RepositoryState.REVERT: "revert",
	RepositoryState.REVERT_SEQUENCE: "revert",
	RepositoryState.CHERRYPICK: "cherry pick",
	RepositoryState.CHERRYPICK_SEQUENCE: "cherry pick",
	RepositoryState.REBASE: "rebase",
	RepositoryState.REBASE_INTERACTIVE: "rebase",
	RepositoryState.REBASE_MERGE: "rebase",
}


def detect_operation(state: RepositoryState | int) -> str | None:
	"""Return the label of the operation in progress, or None when there is none to show."""
	try:
		state = RepositoryState(state)
	except ValueError:
		return None
	return OPERATION_LABELS.get(state)
