"""Pydantic schemas for the fsh-prompt configuration file."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.color import Color, ColorParseError

from fsh_prompt.prompt.renderer import Shell
from fsh_prompt.prompt.segments import Emphasis, PromptGlyphs


class GlyphsSchema(BaseModel):
	"""Symbols shown in the prompt."""

	model_config = ConfigDict(extra="forbid")

	branch: str = PromptGlyphs.branch
	staged: str = PromptGlyphs.staged
	unstaged: str = PromptGlyphs.unstaged
	no_head: str = PromptGlyphs.no_head
	prompt: str = PromptGlyphs.prompt

	def to_glyphs(self) -> PromptGlyphs:
		"""Convert to the glyph set used by the builders."""
		return PromptGlyphs(**self.model_dump())


class PromptConfigSchema(BaseModel):
	"""Top level configuration."""

	model_config = ConfigDict(extra="forbid")

	show_hostname: bool = True
	path_style: Literal["drive", "posix", "home"] = "drive"
	shell: Shell = Shell.ANSI
	strict: bool = False
	glyphs: GlyphsSchema = Field(default_factory=GlyphsSchema)
	palette: dict[Emphasis, str] = Field(default_factory=dict)

	@field_validator("palette")
	@classmethod
	def validate_palette(cls, value: dict[Emphasis, str]) -> dict[Emphasis, str]:
		"""Reject colours rich cannot parse."""
		for emphasis, colour in value.items():
			try:
				Color.parse(colour)
			except ColorParseError as e:
				msg = f"Invalid colour for {emphasis.value}: {colour!r}"
				raise ValueError(msg) from e
		return value
