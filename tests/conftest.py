"""Shared fixtures for mod helper tests."""

import json
from pathlib import Path

import pytest


def write_mod(root: Path, name: str = "foo", version: str = "1.0.0", **extra) -> Path:
    """Create a minimal mod folder with info.json and control.lua."""
    root.mkdir(parents=True, exist_ok=True)
    info = {"name": name, "version": version, **extra}
    (root / "info.json").write_text(json.dumps(info), encoding="utf-8")
    (root / "control.lua").write_text("script.on_init(function() end)\n", encoding="utf-8")
    return root


@pytest.fixture
def make_mod():
    """Factory fixture returning write_mod."""
    return write_mod


@pytest.fixture
def mod_root(tmp_path):
    """A single mod 'foo' 1.0.0 under tmp_path/foo."""
    return write_mod(tmp_path / "foo")
