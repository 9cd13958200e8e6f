"""
Rendering of display segments to terminal escape sequences.

Shells need to know which parts of a prompt take no room on screen, so the
escape sequences are wrapped in ``\\[ \\]`` for bash and ``%{ %}`` for zsh.

"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from rich.color import ColorSystem

from fsh_prompt.prompt.theme import Palette

if TYPE_CHECKING:
	from collections.abc import Iterable

	from fsh_prompt.prompt.segments import DisplaySegment

RESET = "\x1b[0m"


class Shell(str, Enum):
	"""Output targets for the rendered prompt."""

	ANSI = "ansi"
	BASH = "bash"
	ZSH = "zsh"


BASH_ESCAPES = str.maketrans({"\\": "\\\\", "$": "\\$", "`": "\\`", "!": "\\041"})


def escape_text(text: str, shell: Shell) -> str:
	"""
	Escape characters that have a special meaning in the shell's prompt variable.

	Bash runs parameter expansion and command substitution on ``PS1`` after
	decoding it, so ``$`` and backticks are quoted. ``!`` is written as an octal
	escape, which also keeps POSIX mode from replacing it with the history number.
	"""
	if shell is Shell.BASH:
		return text.translate(BASH_ESCAPES)
	if shell is Shell.ZSH:
		return text.replace("%", "%%")
	return text


def _wrap_invisible(codes: str, shell: Shell) -> str:
	if shell is Shell.BASH:
		return f"\\[{codes}\\]"
	if shell is Shell.ZSH:
		return f"%{{{codes}%}}"
	return codes


def render_segment(segment: DisplaySegment, palette: Palette, shell: Shell = Shell.ANSI) -> str:
	"""
	Render a single segment without its trailing space.

	Args:
		segment: The segment to render
		palette: Colours for each emphasis category
		shell: The shell the output is meant for

	Returns:
		str: The styled text
	"""
	text = escape_text(segment.text, shell)
	style = palette.style_for(segment.emphasis)
	rendered = style.render(text, color_system=ColorSystem.TRUECOLOR)
	if rendered == text:
		return text
	# rich renders as <start codes><text><reset>
	start = rendered[: len(rendered) - len(text) - len(RESET)]
	return f"{_wrap_invisible(start, shell)}{text}{_wrap_invisible(RESET, shell)}"


def render_prompt(
	segments: Iterable[DisplaySegment],
	palette: Palette | None = None,
	shell: Shell = Shell.ANSI,
) -> str:
	"""
	Join rendered segments into the final prompt string.

	A space follows every segment whose ``space_after`` flag is set, the last
	one included, so the cursor does not touch the prompt symbol.
	"""
	palette = palette or Palette()
	parts = []
	for segment in segments:
		parts.append(render_segment(segment, palette, shell))
		if segment.space_after:
			parts.append(" ")
	return "".join(parts)
