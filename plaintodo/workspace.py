"""Workspace root, settings, path helpers for plaintodo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


LIST_SUFFIX = ".txt"
CONFIG_NAME = "plaintodo.yaml"


def workspace_root() -> Path:
    """Get the workspace root directory (contains data/ and todo_lists/)."""
    return Path(
        os.environ.get("PLAINTODO_ROOT", os.getcwd())
    ).expanduser().resolve()


@dataclass
class Settings:
    lists_dir: str = "todo_lists"
    index_file: str = "data/paths.txt"
    clear_screen: bool = True

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            lists_dir=str(d.get("lists_dir") or "todo_lists"),
            index_file=str(d.get("index_file") or "data/paths.txt"),
            clear_screen=bool(d.get("clear_screen", True)),
        )


def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / CONFIG_NAME


def load_settings(root: Path | None = None) -> Settings:
    """Read plaintodo.yaml, falling back to defaults if missing or malformed."""
    path = config_path(root)
    if not path.exists():
        return Settings()
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return Settings()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return Settings()
    return Settings.from_dict(data if isinstance(data, dict) else {})


# ── Path helpers ──────────────────────────────────────────────

def lists_dir(root: Path | None = None, settings: Settings | None = None) -> Path:
    if root is None:
        root = workspace_root()
    if settings is None:
        settings = load_settings(root)
    return root / settings.lists_dir


def index_path(root: Path | None = None, settings: Settings | None = None) -> Path:
    if root is None:
        root = workspace_root()
    if settings is None:
        settings = load_settings(root)
    return root / settings.index_file


def list_path(directory: Path, name: str) -> Path:
    """Derive the backing file of a list: <directory>/<name>.txt"""
    return directory / f"{name}{LIST_SUFFIX}"


def list_name(path: Path) -> str:
    """Inverse of list_path: the file name with the .txt suffix stripped."""
    name = path.name
    if name.endswith(LIST_SUFFIX):
        return name[: -len(LIST_SUFFIX)]
    return name
