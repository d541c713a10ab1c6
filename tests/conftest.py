# -*- coding: utf-8 -*-
"""
Shared test configuration.

Widgets are created without a display, and drafts never touch the real
drafts directory.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from app.config import Config


@pytest.fixture(autouse=True)
def isolated_drafts_dir(tmp_path, monkeypatch):
    """Point the default draft store at a per-test directory."""
    drafts_dir = tmp_path / "drafts"
    monkeypatch.setattr(Config, "DRAFTS_DIR", drafts_dir)
    return drafts_dir
