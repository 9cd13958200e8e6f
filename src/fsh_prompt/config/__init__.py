"""Configuration for fsh-prompt."""

from fsh_prompt.config.config_loader import ConfigError, ConfigLoader, ConfigParsingError
from fsh_prompt.config.config_schema import GlyphsSchema, PromptConfigSchema

__all__ = [
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"GlyphsSchema",
	"PromptConfigSchema",
]
