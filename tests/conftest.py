"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temp dir so no real config is read."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def mock_list_sdks_output() -> str:
    """Sample `dotnet --list-sdks` output for testing."""
    return """8.0.406 [/usr/share/dotnet/sdk]
9.0.100 [/usr/share/dotnet/sdk]"""


@pytest.fixture
def mock_malformed_sdks_output() -> str:
    """`dotnet --list-sdks` output with malformed lines mixed in."""
    return """8.0.406 [/usr/share/dotnet/sdk]
no bracket here
 [/usr/share/dotnet/sdk]
9.0.100 []

9.0.100 [/usr/share/dotnet/sdk]"""


@pytest.fixture
def sdk_root(tmp_path: Path) -> Path:
    """Create a fake SDK root with 8.0.406, 8.1.0 and 9.0.100 installed."""
    root = tmp_path / "dotnet" / "sdk"
    for version in ("8.0.406", "8.1.0", "9.0.100"):
        (root / version).mkdir(parents=True)
        (root / version / "dotnet.dll").write_text("stub")
    return root


@pytest.fixture
def sdk_root_output(sdk_root: Path) -> str:
    """`dotnet --list-sdks` output describing the sdk_root fixture."""
    return "\n".join(f"{v} [{sdk_root}]" for v in ("8.0.406", "8.1.0", "9.0.100"))
