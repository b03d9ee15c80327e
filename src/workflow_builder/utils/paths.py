"""Shared filesystem paths."""

from __future__ import annotations

import os
from pathlib import Path


def repo_root() -> Path:
    return Path(__file__).resolve().parents[3]


def data_dir() -> Path:
    """Where logs live: WORKFLOW_BUILDER_DATA_DIR, relative paths resolved against the repo root."""
    raw = os.getenv("WORKFLOW_BUILDER_DATA_DIR", "").strip()
    if not raw:
        return repo_root() / ".workflow_builder"
    path = Path(raw)
    if not path.is_absolute():
        path = (repo_root() / path).resolve()
    return path
