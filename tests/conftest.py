"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from sir.api.config.SirConfig import SirConfig

_DOMAIN_MARKERS = {
    "config": "configuration loading and display",
    "link": "image link grammar and caption editing",
    "naming": "collision-free path resolution",
    "tracker": "link removal tracking",
    "rename": "single and bulk image renames",
    "orphan": "orphaned image detection and cleanup",
    "vault": "directory-backed vault host",
    "controller": "editor and filesystem event handling",
    "cli": "command-line front end",
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    for name, description in _DOMAIN_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(vault_dir: Path | str = "~/_vault") -> dict:
    """Minimal valid SIR configuration dict for testing."""
    return {
        "vault": {
            "base_dir": str(vault_dir),
            "attachment_folder": "",
        },
        "rename": {
            "suffix_mode": "sequential",
            "timestamp_format": "YYYYMMDD-HHmmss",
            "aggressive_sanitization": False,
            "note_suffixes": [".excalidraw"],
            "auto_rename_on_create": True,
            "prompt_delete_on_link_removal": True,
        },
        "tracker": {
            "debounce_ms": 300,
            "processing_ttl_ms": 1000,
        },
        "log": {
            "level": "INFO",
        },
    }


def write_vault_file(vault_dir: Path, rel_path: str, content: str | bytes) -> Path:
    """Create a file inside the test vault, parents included."""
    path = vault_dir / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault directory."""
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def backend(vault_dir: Path):
    """Directory-backed vault host over ``vault_dir``."""
    from sir.api.vault._filesystem._Backend import _Backend

    return _Backend(vault_dir)


@pytest.fixture
def sir_home(tmp_path: Path, monkeypatch, vault_dir: Path) -> Path:
    """Set up SIR_HOME with a config file pointing at ``vault_dir``.

    Returns:
        Path to the SIR home directory
    """
    home = tmp_path / ".sir"
    home.mkdir()
    monkeypatch.setenv("SIR_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(vault_dir)), encoding="utf-8")
    return home


@pytest.fixture
def sir_config(sir_home: Path) -> SirConfig:
    return SirConfig.load()


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
