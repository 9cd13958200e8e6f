"""Tests for assembling the complete prompt."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from pygit2.repository import Repository

from fsh_prompt.config import GlyphsSchema, PromptConfigSchema
from fsh_prompt.git.utils import GitError
from fsh_prompt.prompt.builder import (
	NO_HOSTNAME_ENV,
	build_segments,
	current_user,
	format_location,
	git_segments,
	identity_segments,
	status_segment,
)
from fsh_prompt.prompt.segments import DisplaySegment, Emphasis, PromptGlyphs

GLYPHS = PromptGlyphs()


@pytest.fixture
def fixed_identity():
	"""Pin the user and host names."""
	with (
		patch("fsh_prompt.prompt.builder.getpass.getuser", return_value="alice"),
		patch("fsh_prompt.prompt.builder.socket.gethostname", return_value="box"),
	):
		yield


@pytest.mark.unit
@pytest.mark.usefixtures("fixed_identity")
class TestIdentitySegments:
	"""Tests for the user and host segments."""

	def test_user_and_host(self) -> None:
		"""User and host are joined by an unspaced ``@``."""
		assert identity_segments(show_hostname=True) == [
			DisplaySegment("alice", Emphasis.IDENTITY, space_after=False),
			DisplaySegment("@", space_after=False),
			DisplaySegment("box", Emphasis.HOST),
		]

	def test_user_only(self) -> None:
		"""Hiding the host leaves a single spaced user segment."""
		assert identity_segments(show_hostname=False) == [DisplaySegment("alice", Emphasis.IDENTITY)]


@pytest.mark.unit
def test_unknown_user() -> None:
	"""A user that cannot be looked up is shown as ``unknown``."""
	with patch("fsh_prompt.prompt.builder.getpass.getuser", side_effect=OSError("no user")):
		assert current_user() == "unknown"


@pytest.mark.unit
class TestFormatLocation:
	"""Tests for the directory formatting styles."""

	def test_drive_style(self) -> None:
		"""The default style mimics a drive letter path."""
		assert format_location(Path("/home/alice/src")) == "C:\\home\\alice\\src"

	def test_drive_style_root(self) -> None:
		"""The root directory becomes the bare drive."""
		assert format_location(Path("/"), "drive") == "C:\\"

	def test_posix_style(self) -> None:
		"""The posix style leaves the path untouched."""
		assert format_location(Path("/var/lib/data"), "posix") == "/var/lib/data"

	def test_home_style(self) -> None:
		"""The home directory is abbreviated to ``~``."""
		home = Path.home()
		assert format_location(home, "home") == "~"
		assert format_location(home / "src" / "app", "home") == "~/src/app"

	def test_home_style_outside_home(self, tmp_path: Path) -> None:
		"""Paths outside the home directory are kept whole."""
		with patch("fsh_prompt.prompt.builder.Path.home", return_value=Path("/nonexistent/home")):
			assert format_location(tmp_path, "home") == str(tmp_path)


@pytest.mark.unit
class TestStatusSegment:
	"""Tests for the exit status segment."""

	def test_success(self) -> None:
		"""A successful command shows the plain prompt arrow."""
		assert status_segment(0) == DisplaySegment(GLYPHS.prompt, Emphasis.PROMPT)

	def test_failure(self) -> None:
		"""A failed command shows its status before the arrow."""
		assert status_segment(127) == DisplaySegment(f"127 {GLYPHS.prompt}", Emphasis.NEGATIVE)

	def test_custom_glyph(self) -> None:
		"""The arrow glyph is configurable."""
		assert status_segment(1, PromptGlyphs(prompt="$")).text == "1 $"


@pytest.mark.unit
@pytest.mark.git
class TestGitSegments:
	"""Tests for the git part of the prompt and the failure policy."""

	def test_outside_repository(self, tmp_path: Path) -> None:
		"""No repository means no git segments."""
		with patch("fsh_prompt.prompt.builder.open_repository", return_value=None):
			assert git_segments(tmp_path) == []

	def test_discovers_repository_from_subdirectory(self, git_repo: Repository) -> None:
		"""The repository is found from any directory inside it."""
		subdir = Path(git_repo.workdir) / "src" / "pkg"
		subdir.mkdir(parents=True)

		segments = git_segments(subdir)

		assert segments == [DisplaySegment(f"{GLYPHS.branch} main", Emphasis.REFERENCE)]

	def test_failure_is_omitted(self, git_repo: Repository, caplog: pytest.LogCaptureFixture) -> None:
		"""By default a broken repository drops the git segments and logs a warning."""
		with (
			patch("fsh_prompt.prompt.builder.inspect_repository", side_effect=GitError("HEAD is broken")),
			caplog.at_level(logging.WARNING, logger="fsh_prompt.prompt.builder"),
		):
			segments = git_segments(Path(git_repo.workdir))

		assert segments == []
		assert "HEAD is broken" in caplog.text

	def test_failure_is_raised_in_strict_mode(self, git_repo: Repository) -> None:
		"""Strict mode lets the error through."""
		with (
			patch("fsh_prompt.prompt.builder.inspect_repository", side_effect=GitError("HEAD is broken")),
			pytest.raises(GitError, match="HEAD is broken"),
		):
			git_segments(Path(git_repo.workdir), strict=True)

	def test_open_failure_is_omitted(self, tmp_path: Path) -> None:
		"""A repository that cannot be opened is treated like any other git failure."""
		with patch("fsh_prompt.prompt.builder.open_repository", side_effect=GitError("cannot open")):
			assert git_segments(tmp_path) == []


@pytest.mark.unit
@pytest.mark.usefixtures("fixed_identity")
class TestBuildSegments:
	"""Tests for the full segment list."""

	def test_outside_repository(self, tmp_path: Path) -> None:
		"""Identity, location and status only."""
		with patch("fsh_prompt.prompt.builder.open_repository", return_value=None):
			segments = build_segments(0, PromptConfigSchema(path_style="posix"), cwd=tmp_path)

		assert [segment.text for segment in segments] == ["alice", "@", "box", "in", str(tmp_path), GLYPHS.prompt]

	def test_inside_repository(self, git_repo: Repository) -> None:
		"""Git segments sit between the location and the status."""
		cwd = Path(git_repo.workdir)
		segments = build_segments(2, PromptConfigSchema(show_hostname=False), cwd=cwd)

		assert segments == [
			DisplaySegment("alice", Emphasis.IDENTITY),
			DisplaySegment("in"),
			DisplaySegment(format_location(cwd), Emphasis.LOCATION),
			DisplaySegment(f"{GLYPHS.branch} main", Emphasis.REFERENCE),
			DisplaySegment(f"2 {GLYPHS.prompt}", Emphasis.NEGATIVE),
		]

	def test_environment_hides_hostname(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
		"""Setting the environment toggle hides the host even when configured on."""
		monkeypatch.setenv(NO_HOSTNAME_ENV, "")
		with patch("fsh_prompt.prompt.builder.open_repository", return_value=None):
			segments = build_segments(0, PromptConfigSchema(show_hostname=True), cwd=tmp_path)

		assert "box" not in [segment.text for segment in segments]
		assert segments[0] == DisplaySegment("alice", Emphasis.IDENTITY)

	def test_configured_glyphs(self, git_repo: Repository) -> None:
		"""Glyphs from the configuration reach every builder."""
		config = PromptConfigSchema(glyphs=GlyphsSchema(branch="git:", prompt=">"))

		segments = build_segments(0, config, cwd=Path(git_repo.workdir))

		assert DisplaySegment("git: main", Emphasis.REFERENCE) in segments
		assert segments[-1] == DisplaySegment(">", Emphasis.PROMPT)

	def test_strict_mode_propagates(self, tmp_path: Path) -> None:
		"""Strict configuration turns git failures into errors."""
		with (
			patch("fsh_prompt.prompt.builder.open_repository", side_effect=GitError("cannot open")),
			pytest.raises(GitError),
		):
			build_segments(0, PromptConfigSchema(strict=True), cwd=tmp_path)
