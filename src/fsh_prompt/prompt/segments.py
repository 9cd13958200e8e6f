"""Display segments produced by the prompt builders."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Emphasis(str, Enum):
	"""Semantic styling roles a segment can carry."""

	IDENTITY = "identity"
	HOST = "host"
	LOCATION = "location"
	REFERENCE = "reference"
	OPERATION = "operation"
	POSITIVE = "positive"
	NEGATIVE = "negative"
	PROMPT = "prompt"


@dataclass(frozen=True)
class DisplaySegment:
	"""A unit of prompt output. ``emphasis`` is None for plain text."""

	text: str
	emphasis: Emphasis | None = None
	space_after: bool = True

	@classmethod
	def plain(cls, text: str) -> DisplaySegment:
		"""Create an unstyled segment."""
		return cls(text)

	def no_space(self) -> DisplaySegment:
		"""Return a copy of the segment without the trailing space."""
		return replace(self, space_after=False)


@dataclass(frozen=True)
class PromptGlyphs:
	"""Fixed symbols used in the prompt."""

	branch: str = "\ue725"  # nf-dev-git_branch
	staged: str = "+"
	unstaged: str = "\u25cf"
	no_head: str = "(no HEAD)"
	prompt: str = "\uf061"  # nf-fa-arrow_right
