"""fsh-prompt: a colour-coded, git-aware shell prompt."""

__version__ = "0.3.0"
