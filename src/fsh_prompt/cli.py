"""Command-line interface for fsh-prompt."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from fsh_prompt import __version__
from fsh_prompt.config import ConfigError, ConfigLoader, PromptConfigSchema
from fsh_prompt.git.utils import GitError
from fsh_prompt.prompt.builder import build_segments
from fsh_prompt.prompt.renderer import Shell, render_prompt
from fsh_prompt.prompt.theme import Palette
from fsh_prompt.utils.log_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
	help=f"fsh-prompt - a git-aware shell prompt\n\nVersion: {__version__}",
	add_completion=False,
	context_settings={"help_option_names": ["-h", "--help"]},
)

LastStatusArg = Annotated[
	int,
	typer.Argument(
		help="Exit status of the previous command",
		show_default=True,
	),
]

ShellOpt = Annotated[
	Shell | None,
	typer.Option(
		"--shell",
		"-s",
		case_sensitive=False,
		help="Escape the prompt for this shell (overrides config)",
	),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]

StrictFlag = Annotated[
	bool,
	typer.Option(
		"--strict",
		help="Fail instead of omitting git information when the repository cannot be read",
	),
]

VerboseFlag = Annotated[
	bool,
	typer.Option(
		"--verbose",
		"-v",
		help="Enable verbose logging on stderr",
	),
]

LogFileOpt = Annotated[
	Path | None,
	typer.Option(
		"--log-file",
		help="Also write debug logs to this file",
	),
]


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"fsh-prompt version: {__version__}")
		raise typer.Exit


def load_config(config_file: Path | None) -> PromptConfigSchema:
	"""Load the configuration, falling back to defaults when it is broken."""
	try:
		return ConfigLoader(config_file).get
	except ConfigError as e:
		logger.warning("%s Using default configuration.", e)
		return PromptConfigSchema()


@app.command()
def prompt(
	last_status: LastStatusArg = 0,
	shell: ShellOpt = None,
	config_file: ConfigOpt = None,
	is_strict: StrictFlag = False,
	is_verbose: VerboseFlag = False,
	log_file: LogFileOpt = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Print the prompt for the current directory."""
	setup_logging(is_verbose=is_verbose, log_file_path=log_file)

	config = load_config(config_file)
	overrides: dict[str, object] = {}
	if shell is not None:
		overrides["shell"] = shell
	if is_strict:
		overrides["strict"] = True
	if overrides:
		config = config.model_copy(update=overrides)

	try:
		segments = build_segments(last_status, config)
	except GitError:
		logger.exception("Failed to read the git repository")
		raise typer.Exit(1) from None

	# stdout is usually a pipe into $PS1, where click would strip the escape codes
	typer.echo(render_prompt(segments, Palette(config.palette), config.shell), nl=False, color=True)


def main() -> None:
	"""Command-line entry point."""
	app()


if __name__ == "__main__":
	main()
