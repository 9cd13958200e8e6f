"""Git state inspection for the prompt."""

from fsh_prompt.git.inspector import inspect_repository
from fsh_prompt.git.operation import detect_operation
from fsh_prompt.git.reference import HeadReference, ReferenceKind, resolve_head
from fsh_prompt.git.status import StatusSummary, classify_statuses, scan_status
from fsh_prompt.git.utils import GitError, open_repository

__all__ = [
	"GitError",
	"HeadReference",
	"ReferenceKind",
	"StatusSummary",
	"classify_statuses",
	"detect_operation",
	"inspect_repository",
	"open_repository",
	"resolve_head",
	"scan_status",
]
