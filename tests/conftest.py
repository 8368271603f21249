"""Shared fixtures: a small content collection tree on disk."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def project(tmp_path, monkeypatch) -> Path:
    """Project root with an empty ``src/content`` and settings pointed at it."""
    content = tmp_path / "src" / "content"
    content.mkdir(parents=True)
    monkeypatch.setattr("linkcheck.config.settings.project_root", tmp_path)
    monkeypatch.setattr("linkcheck.config.settings.content_dir_override", None)
    return tmp_path


@pytest.fixture
def content_dir(project) -> Path:
    return project / "src" / "content"


@pytest.fixture
def make_doc(content_dir):
    """Return a helper that writes a markdown file under the content root."""

    def _make(relative: str, text: str) -> Path:
        path = content_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _make
