# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Pytest fixtures for jotter tests.
"""

from pathlib import Path

import pytest
import yaml

from jotter.core.config import JotterConfig, reload_config
from jotter.logging import reset_logging


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, tmp_path: Path):
    """Reset config and logging to defaults before each test.

    This prevents a developer's ~/.jotter/config.json from leaking into tests.
    """
    config_path = tmp_path / "nonexistent_config.json"
    monkeypatch.setattr(JotterConfig, "get_config_path", lambda: config_path)
    reload_config()
    reset_logging()
    yield
    reload_config()
    reset_logging()


@pytest.fixture
def journal_dir(tmp_path: Path) -> Path:
    """An empty journal directory."""
    directory = tmp_path / "journal"
    directory.mkdir()
    return directory


def split_entry(content: str) -> tuple[dict, str]:
    """Split an entry into parsed frontmatter and body."""
    _, frontmatter, body = content.split("---\n", 2)
    return yaml.safe_load(frontmatter), body


def headings(content: str) -> list[str]:
    """Day headings of a diary, without the ###### marker."""
    return [line[len("###### "):] for line in content.splitlines() if line.startswith("###### ")]
