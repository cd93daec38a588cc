# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

# main must be imported before any command module; it registers them
from pkgmeta_cli.main import cli  # noqa: F401

PKG_INFO = """# demo pkg.info file

name: demo
version: 1.2.3
description: A demo project
tenant: acme
repo: https://example.com/acme/demo
arch:
- linux_amd64
- darwin_arm64
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with a valid pkg.info."""
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    (project_dir / "pkg.info").write_text(PKG_INFO)
    yield project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory without pkg.info."""
    project_dir = tmp_path / "empty"
    project_dir.mkdir()
    yield project_dir
