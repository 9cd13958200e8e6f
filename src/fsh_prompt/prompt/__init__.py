"""Prompt segments, styling and rendering."""

from fsh_prompt.prompt.renderer import Shell, render_prompt
from fsh_prompt.prompt.segments import DisplaySegment, Emphasis, PromptGlyphs
from fsh_prompt.prompt.theme import Palette

__all__ = [
	"DisplaySegment",
	"Emphasis",
	"Palette",
	"PromptGlyphs",
	"Shell",
	"render_prompt",
]
