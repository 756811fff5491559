"""Shared pytest fixtures for the bytecopy test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ── Settings Fixtures ─────────────────────────────────────────────


@pytest.fixture
def settings_path() -> Path:
    return FIXTURES_DIR / "settings.yaml"


@pytest.fixture
def invalid_settings_path() -> Path:
    return FIXTURES_DIR / "invalid_settings.yaml"


@pytest.fixture
def empty_settings_path() -> Path:
    return FIXTURES_DIR / "empty_settings.yaml"


@pytest.fixture
def list_settings_path() -> Path:
    return FIXTURES_DIR / "list_settings.yaml"


@pytest.fixture
def nonexistent_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "does_not_exist.yaml"


# ── File Fixtures ─────────────────────────────────────────────────


@pytest.fixture
def byte_ramp() -> bytes:
    """Bytes 0x00..0xFF repeated 5 times (1280 bytes)."""
    return bytes(range(256)) * 5


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Factory that writes ``data`` to ``tmp_path / name`` and returns the path."""

    def _make(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def source_file(make_file, byte_ramp: bytes) -> Path:
    return make_file("source.bin", byte_ramp)


@pytest.fixture
def dest_path(tmp_path: Path) -> Path:
    return tmp_path / "dest.bin"
