"""Colour palette keyed by emphasis category."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.style import Style

from fsh_prompt.prompt.segments import Emphasis

if TYPE_CHECKING:
	from collections.abc import Mapping

# Dracula colours
DEFAULT_COLOURS: dict[Emphasis, str] = {
	Emphasis.IDENTITY: "#bd93f9",
	Emphasis.HOST: "#ff79c6",
	Emphasis.LOCATION: "#50fa7b",
	Emphasis.REFERENCE: "#8be9fd",
	Emphasis.OPERATION: "#ff79c6",
	Emphasis.POSITIVE: "#50fa7b",
	Emphasis.NEGATIVE: "#ff5555",
	Emphasis.PROMPT: "#f1fa8c",
}


class Palette:
	"""Maps emphasis categories to rich styles. Every emphasis is rendered bold."""

	def __init__(self, colours: Mapping[Emphasis, str] | None = None) -> None:
		"""
		Build the palette.

		Args:
			colours: Colour overrides applied on top of ``DEFAULT_COLOURS``

		Raises:
			rich.errors.StyleSyntaxError: If a colour cannot be parsed
		"""
		merged = dict(DEFAULT_COLOURS)
		if colours:
			merged.update(colours)
		self._styles = {emphasis: Style.parse(f"bold {colour}") for emphasis, colour in merged.items()}

	def style_for(self, emphasis: Emphasis | None) -> Style:
		"""Return the style for ``emphasis``; plain text gets an empty style."""
		if emphasis is None:
			return Style.null()
		return self._styles[emphasis]
