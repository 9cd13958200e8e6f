"""
Configuration loader for fsh-prompt.

This module provides functionality for loading the prompt configuration
from YAML files into the Pydantic schema.

"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from fsh_prompt.config.config_schema import PromptConfigSchema

logger = logging.getLogger(__name__)

LOCAL_CONFIG_NAME = ".fsh-prompt.yml"


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigParsingError(ConfigError):
	"""Exception raised when configuration file cannot be parsed."""


class ConfigLoader:
	"""
	Loads the prompt configuration.

	Values missing from the file fall back to the defaults of
	``PromptConfigSchema``.

	"""

	def __init__(self, config_file: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
			config_file: Path to configuration file (optional)

		Raises:
			ConfigParsingError: If the configuration file cannot be parsed

		"""
		self._resolved_config_file = self._resolve_config_file(config_file)
		self._config = self._load_config()

	@staticmethod
	def _resolve_config_file(config_file: Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.fsh-prompt.yml in the current directory
		2. $XDG_CONFIG_HOME/fsh-prompt/config.yml

		Args:
			config_file: Explicitly provided config file path (optional)

		Returns:
			Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			return config_file.expanduser()

		local_config = Path(LOCAL_CONFIG_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "fsh-prompt" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	@staticmethod
	def _parse_yaml_file(file_path: Path) -> dict[str, Any]:
		"""
		Parse a YAML file into a dictionary.

		Raises:
			yaml.YAMLError: If the file is not valid YAML or not a mapping
		"""
		with file_path.open(encoding="utf-8") as f:
			content = yaml.safe_load(f)
			if content is None:  # Empty file
				return {}
			if not isinstance(content, dict):
				msg = f"File {file_path} does not contain a valid YAML dictionary"
				raise yaml.YAMLError(msg)
			return content

	def _load_config(self) -> PromptConfigSchema:
		"""
		Load configuration from file and parse it into PromptConfigSchema.

		Raises:
			ConfigParsingError: If configuration file exists but cannot be loaded or parsed.

		"""
		file_config_dict: dict[str, Any] = {}
		config_file = self._resolved_config_file
		if config_file is None:
			logger.debug("No configuration file found. Using default configuration.")
		elif not config_file.exists():
			logger.info("Configuration file not found: %s. Using default configuration.", config_file)
		else:
			try:
				file_config_dict = self._parse_yaml_file(config_file)
			except yaml.YAMLError as e:
				msg = f"Configuration file {config_file} does not contain a valid YAML dictionary."
				raise ConfigParsingError(msg) from e
			except OSError as e:
				msg = f"Error accessing configuration file {config_file}: {e}"
				raise ConfigParsingError(msg) from e
			logger.debug("Loaded configuration from %s", config_file)

		try:
			return PromptConfigSchema(**file_config_dict)
		except ValidationError as e:
			msg = f"Error parsing configuration into schema: {e}"
			raise ConfigParsingError(msg) from e

	@property
	def config_file(self) -> Path | None:
		"""The configuration file in use, if any."""
		return self._resolved_config_file

	@property
	def get(self) -> PromptConfigSchema:
		"""
		Get the current configuration.

		Returns:
			PromptConfigSchema: The current configuration
		"""
		return self._config
