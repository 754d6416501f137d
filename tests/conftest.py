"""
Pytest configuration and shared fixtures.
"""

import json
import os
import tempfile
from unittest.mock import MagicMock

import pytest

from storeshell.adapters.files.local_fs_adapter import LocalFileStoreAdapter
from storeshell.config.settings import Settings
from storeshell.container import DependencyContainer
from storeshell.ports.environment.environment_info_port import EnvironmentInfoPort


@pytest.fixture
def temp_directory():
    """
    Create a temporary store root for testing file operations.

    Layout:
        /test1.txt
        /config.json
        /subdir/test3.md
        /subdir/nested/

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "config.json"), "w") as f:
            json.dump({"ssid": "HomeNet", "retries": 3}, f, indent=2)

        # Create a subdirectory with a file and an empty directory
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(os.path.join(subdir, "nested"))

        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def file_store(temp_directory, mock_logger):
    """Local store rooted at the temporary directory with a fixed capacity."""
    return LocalFileStoreAdapter(temp_directory, 1_000_000, mock_logger)


@pytest.fixture
def mock_environment():
    environment = MagicMock(spec=EnvironmentInfoPort)
    environment.uptime.return_value = "Uptime: 0d 00h 01m 05s"
    environment.free_memory.return_value = "Free memory: 2048 bytes"
    environment.chip_info.return_value = "Platform: test"
    return environment


@pytest.fixture
def settings(temp_directory, monkeypatch):
    """Settings pointing at the temporary store root."""
    monkeypatch.setenv("STORESHELL_ROOT", temp_directory)
    monkeypatch.setenv("STORESHELL_CAPACITY_BYTES", "1000000")
    monkeypatch.setenv("STORESHELL_MAX_DOCUMENT_BYTES", "512")
    monkeypatch.delenv("STORESHELL_ATOMIC_WRITES", raising=False)
    monkeypatch.delenv("STORESHELL_CONFIRM_TOKENS", raising=False)
    return Settings()


@pytest.fixture
def dependency_container(settings, mock_logger):
    """
    Create a dependency container for the temporary store.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def dispatcher(dependency_container, mock_environment):
    dependency_container._instances["environment"] = mock_environment
    return dependency_container.get_dispatcher()
