"""
Assembly of the complete prompt.

The prompt reads ``user@host in <directory> <git state> <status>``. Git
failures never break the prompt unless the configuration asks for strict
mode: the git segments are dropped and a warning is logged instead.

"""

from __future__ import annotations

import getpass
import logging
import os
import socket
from pathlib import Path

from fsh_prompt.config.config_schema import PromptConfigSchema
from fsh_prompt.git.inspector import inspect_repository
from fsh_prompt.git.utils import GitError, open_repository
from fsh_prompt.prompt.segments import DisplaySegment, Emphasis, PromptGlyphs

logger = logging.getLogger(__name__)

NO_HOSTNAME_ENV = "FSH_NO_HOSTNAME"
UNKNOWN_USER = "unknown"


def current_user() -> str:
	"""Return the login name of the current user, or ``unknown``."""
	try:
		return getpass.getuser()
	except (OSError, KeyError):
		logger.debug("Could not determine the current user", exc_info=True)
		return UNKNOWN_USER


def current_directory() -> Path:
	"""Return the working directory, preferring ``$PWD`` when the directory has been removed."""
	try:
		return Path.cwd()
	except FileNotFoundError:
		logger.warning("Current directory no longer exists")
		return Path(os.environ.get("PWD", "/"))


def identity_segments(*, show_hostname: bool) -> list[DisplaySegment]:
	"""Build the ``user`` or ``user@host`` segments."""
	user = DisplaySegment(current_user(), Emphasis.IDENTITY)
	if not show_hostname:
		return [user]
	return [
		user.no_space(),
		DisplaySegment.plain("@").no_space(),
		DisplaySegment(socket.gethostname(), Emphasis.HOST),
	]


def format_location(path: Path, style: str = "drive") -> str:
	"""
	Format the working directory for display.

	Args:
		path: The directory to show
		style: ``drive`` shows the path as ``C:\\home\\user``, ``posix``
			leaves it untouched and ``home`` abbreviates the home directory
			to ``~``

	Returns:
		str: The formatted path
	"""
	if style == "posix":
		return str(path)
	if style == "home":
		try:
			relative = path.relative_to(Path.home())
		except (ValueError, RuntimeError):
			return str(path)
		return "~" if relative == Path() else f"~/{relative.as_posix()}"
	return f"C:{path.as_posix()}".replace("/", "\\")


def location_segments(path: Path, style: str = "drive") -> list[DisplaySegment]:
	"""Build the ``in <directory>`` segments."""
	return [
		DisplaySegment.plain("in"),
		DisplaySegment(format_location(path, style), Emphasis.LOCATION),
	]


def status_segment(last_status: int, glyphs: PromptGlyphs | None = None) -> DisplaySegment:
	"""Build the prompt arrow, prefixed with the exit status when it is non-zero."""
	glyphs = glyphs or PromptGlyphs()
	if last_status == 0:
		return DisplaySegment(glyphs.prompt, Emphasis.PROMPT)
	return DisplaySegment(f"{last_status} {glyphs.prompt}", Emphasis.NEGATIVE)


def git_segments(path: Path, glyphs: PromptGlyphs | None = None, *, strict: bool = False) -> list[DisplaySegment]:
	"""
	Build the git segments for the repository containing ``path``.

	Args:
		path: Directory to look for a repository from
		glyphs: Symbols to use
		strict: Re-raise git failures instead of omitting the segments

	Returns:
		list[DisplaySegment]: The git segments, empty outside a repository
		or when the repository state cannot be read

	Raises:
		GitError: If ``strict`` is set and the repository cannot be read
	"""
	try:
		repo = open_repository(path)
		try:
			return inspect_repository(repo, glyphs)
		finally:
			if repo is not None:
				repo.free()
	except GitError as e:
		if strict:
			raise
		logger.warning("Omitting git information: %s", e)
		return []


def build_segments(
	last_status: int = 0,
	config: PromptConfigSchema | None = None,
	cwd: Path | None = None,
) -> list[DisplaySegment]:
	"""
	Build every segment of the prompt in display order.

	Args:
		last_status: Exit status of the previous command
		config: Prompt configuration (defaults when omitted)
		cwd: Working directory (the process working directory when omitted)

	Returns:
		list[DisplaySegment]: The prompt segments

	Raises:
		GitError: If ``config.strict`` is set and the repository cannot be read
	"""
	config = config or PromptConfigSchema()
	glyphs = config.glyphs.to_glyphs()
	cwd = cwd or current_directory()
	show_hostname = config.show_hostname and NO_HOSTNAME_ENV not in os.environ

	segments = identity_segments(show_hostname=show_hostname)
	segments.extend(location_segments(cwd, config.path_style))
	segments.extend(git_segments(cwd, glyphs, strict=config.strict))
	segments.append(status_segment(last_status, glyphs))
	return segments
