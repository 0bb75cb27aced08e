"""
Pytest configuration and shared fixtures for the flipmonitor test suite.
"""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from flipmonitor.system.platform import PlatformCapabilities  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Platform Fixtures
# ============================================================================


@pytest.fixture
def linux_capabilities():
    """A platform that tells free and available memory apart."""
    return PlatformCapabilities(distinguishes_free_memory=True)


@pytest.fixture
def windows_capabilities():
    """A platform that only knows "all memory"."""
    return PlatformCapabilities(distinguishes_free_memory=False)


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_virtual_memory():
    """Mock psutil.virtual_memory with fixed figures."""
    with patch("flipmonitor.system.memory.psutil.virtual_memory") as mock_vm:
        mock_vm.return_value = Mock(
            total=16 * 1024**3,
            available=8 * 1024**3,
            free=2 * 1024**3,
        )
        yield mock_vm


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def defaults_file(tmp_path):
    """Write a TOML defaults file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "flipmonitor.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
