"""
Tests for the DocumentPatcher use case.
"""

import json
import os
from unittest.mock import MagicMock

import pytest

from storeshell.exceptions import (
    DocumentCorruptError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    DocumentWriteError,
    FileStoreError,
)
from storeshell.ports.files.file_store_port import FileStorePort
from storeshell.use_cases.documents.patch_document import DocumentPatcher


def _read_json(temp_directory, name):
    with open(os.path.join(temp_directory, name), encoding="utf-8") as f:
        return json.load(f)


class TestDocumentPatcher:
    """Test cases for the DocumentPatcher use case."""

    def test_set_field_overwrites_existing_key(self, file_store, temp_directory, mock_logger):
        patcher = DocumentPatcher(file_store, 512, logger=mock_logger)

        patcher.set_field("/config.json", "ssid", "MyNet")

        assert _read_json(temp_directory, "config.json") == {"ssid": "MyNet", "retries": 3}

    def test_set_field_creates_missing_key(self, file_store, temp_directory, mock_logger):
        patcher = DocumentPatcher(file_store, 512, logger=mock_logger)

        document = patcher.set_field("/config.json", "name", "Jane Doe")

        assert document["name"] == "Jane Doe"
        assert _read_json(temp_directory, "config.json") == {
            "ssid": "HomeNet",
            "retries": 3,
            "name": "Jane Doe",
        }

    def test_value_is_always_a_string(self, file_store, temp_directory, mock_logger):
        patcher = DocumentPatcher(file_store, 512, logger=mock_logger)

        patcher.set_field("/config.json", "retries", "5")

        assert _read_json(temp_directory, "config.json")["retries"] == "5"

    def test_set_field_is_idempotent(self, file_store, temp_directory, mock_logger):
        patcher = DocumentPatcher(file_store, 512, logger=mock_logger)
        path = os.path.join(temp_directory, "config.json")

        patcher.set_field("/config.json", "k", "v")
        with open(path, "rb") as f:
            first = f.read()
        patcher.set_field("/config.json", "k", "v")
        with open(path, "rb") as f:
            second = f.read()

        assert first == second

    def test_missing_file(self, file_store, mock_logger):
        patcher = DocumentPatcher(file_store, 512, logger=mock_logger)

        with pytest.raises(DocumentNotFoundError, match="Failed to open JSON file /nope.json"):
            patcher.set_field("/nope.json", "k", "v")

    def test_corrupt_file_is_untouched(self, file_store, temp_directory, mock_logger):
        patcher = DocumentPatcher(file_store, 512, logger=mock_logger)

        with pytest.raises(DocumentCorruptError):
            patcher.set_field("/test1.txt", "k", "v")

        with open(os.path.join(temp_directory, "test1.txt")) as f:
            assert f.read() == "This is a test file."

    def test_too_large_file_is_untouched(self, file_store, temp_directory, mock_logger):
        path = os.path.join(temp_directory, "config.json")
        with open(path, "rb") as f:
            original = f.read()
        patcher = DocumentPatcher(file_store, len(original) - 1, logger=mock_logger)

        with pytest.raises(DocumentTooLargeError):
            patcher.set_field("/config.json", "k", "v")

        with open(path, "rb") as f:
            assert f.read() == original

    def test_growth_past_ceiling_is_not_written(self, file_store, temp_directory, mock_logger):
        path = os.path.join(temp_directory, "config.json")
        with open(path, "rb") as f:
            original = f.read()
        patcher = DocumentPatcher(file_store, len(original) + 8, logger=mock_logger)

        with pytest.raises(DocumentTooLargeError):
            patcher.set_field("/config.json", "motd", "x" * 64)

        with open(path, "rb") as f:
            assert f.read() == original

    def test_write_failure(self, mock_logger):
        store = MagicMock(spec=FileStorePort)
        reader = MagicMock()
        reader.__enter__.return_value.read.return_value = b'{"a": "1"}'
        store.open.side_effect = [reader, FileStoreError("read-only")]
        patcher = DocumentPatcher(store, 512, logger=mock_logger)

        with pytest.raises(DocumentWriteError, match="read-only"):
            patcher.set_field("/c.json", "a", "2")

        mock_logger.error.assert_called_once()

    def test_atomic_write_renames_temp_file(self, file_store, temp_directory, mock_logger):
        patcher = DocumentPatcher(file_store, 512, atomic_writes=True, logger=mock_logger)

        patcher.set_field("/config.json", "ssid", "Atomic")

        assert _read_json(temp_directory, "config.json")["ssid"] == "Atomic"
        assert sorted(os.listdir(temp_directory)) == ["config.json", "subdir", "test1.txt"]

    def test_atomic_write_keeps_existing_tmp_file(self, file_store, temp_directory, mock_logger):
        user_file = os.path.join(temp_directory, "config.json.tmp")
        with open(user_file, "w") as f:
            f.write("keep me")
        patcher = DocumentPatcher(file_store, 512, atomic_writes=True, logger=mock_logger)

        patcher.set_field("/config.json", "ssid", "Atomic")

        with open(user_file) as f:
            assert f.read() == "keep me"
        assert _read_json(temp_directory, "config.json")["ssid"] == "Atomic"

    def test_atomic_write_rename_failure_cleans_up(self, mock_logger):
        store = MagicMock(spec=FileStorePort)
        reader = MagicMock()
        reader.__enter__.return_value.read.return_value = b'{"a": "1"}'
        store.open.side_effect = [reader, MagicMock()]
        store.exists.return_value = False
        store.rename.return_value = False
        store.remove.return_value = True
        patcher = DocumentPatcher(store, 512, atomic_writes=True, logger=mock_logger)

        with pytest.raises(DocumentWriteError, match="Failed to replace /c.json"):
            patcher.set_field("/c.json", "a", "2")

        temp_path, mode = store.open.call_args.args
        assert temp_path.startswith("/c.json.") and temp_path.endswith(".tmp")
        assert mode == "wb"
        store.remove.assert_called_once_with(temp_path)
        mock_logger.warning.assert_not_called()

    def test_atomic_write_reports_leftover_temp_file(self, mock_logger):
        store = MagicMock(spec=FileStorePort)
        reader = MagicMock()
        reader.__enter__.return_value.read.return_value = b'{"a": "1"}'
        store.open.side_effect = [reader, MagicMock()]
        store.exists.return_value = False
        store.rename.return_value = False
        store.remove.return_value = False
        patcher = DocumentPatcher(store, 512, atomic_writes=True, logger=mock_logger)

        with pytest.raises(DocumentWriteError):
            patcher.set_field("/c.json", "a", "2")

        mock_logger.warning.assert_called_once()
        assert "Could not remove temporary file /c.json." in mock_logger.warning.call_args.args[0]
