"""Global test fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pygit2 import init_repository
from pygit2.repository import Repository

from tests.base import commit_all, write_file


@pytest.fixture
def unborn_repo(tmp_path: Path) -> Repository:
	"""A repository on branch ``main`` without any commit."""
	return init_repository(str(tmp_path / "repo"), initial_head="main")


@pytest.fixture
def git_repo(unborn_repo: Repository) -> Repository:
	"""A clean repository with one commit on ``main``."""
	write_file(unborn_repo, "README.md", "# test\n")
	commit_all(unborn_repo, "initial commit")
	return unborn_repo


@pytest.fixture(autouse=True)
def _no_hostname_override(monkeypatch: pytest.MonkeyPatch) -> None:
	"""Keep the caller's environment from hiding the host name."""
	monkeypatch.delenv("FSH_NO_HOSTNAME", raising=False)
