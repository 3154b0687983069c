"""Unit tests for global.json pin I/O."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from dver.core.pin import PinError, read_pin, write_pin


class TestWritePin:
    """Tests for write_pin."""

    def test_creates_document_without_backup(self, tmp_path: Path) -> None:
        """A fresh directory gets global.json and no backup."""
        path = write_pin("9.0.100", tmp_path)

        assert path == tmp_path / "global.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {"sdk": {"version": "9.0.100"}}
        assert not (tmp_path / "global.json.bak").exists()

    def test_pretty_printed(self, tmp_path: Path) -> None:
        """The document is indented with two spaces."""
        path = write_pin("9.0.100", tmp_path)

        assert path.read_text(encoding="utf-8") == (
            '{\n  "sdk": {\n    "version": "9.0.100"\n  }\n}'
        )

    def test_backs_up_existing_document(self, tmp_path: Path) -> None:
        """Prior content is copied byte-for-byte before overwriting."""
        original = b'{\r\n  "sdk": {"version": "8.0.406", "rollForward": "latestMajor"}\r\n}'
        (tmp_path / "global.json").write_bytes(original)

        write_pin("9.0.100", tmp_path)

        assert (tmp_path / "global.json.bak").read_bytes() == original
        pinned = json.loads((tmp_path / "global.json").read_text(encoding="utf-8"))
        assert pinned == {"sdk": {"version": "9.0.100"}}

    def test_backup_failure_is_ignored(self, tmp_path: Path) -> None:
        """A failed backup does not block the write."""
        (tmp_path / "global.json").write_text("old")

        with patch("dver.core.pin.shutil.copyfile", side_effect=PermissionError("denied")):
            write_pin("9.0.100", tmp_path)

        assert not (tmp_path / "global.json.bak").exists()
        assert json.loads((tmp_path / "global.json").read_text()) == {
            "sdk": {"version": "9.0.100"}
        }

    def test_version_stored_verbatim(self, tmp_path: Path) -> None:
        """No syntax validation is applied to the version."""
        path = write_pin("not a version ü", tmp_path)

        assert json.loads(path.read_text(encoding="utf-8"))["sdk"]["version"] == "not a version ü"
        assert "not a version ü".encode() in path.read_bytes()
        assert b"\\u00fc" not in path.read_bytes()

    def test_empty_version_rejected(self, tmp_path: Path) -> None:
        """An empty version is refused."""
        with pytest.raises(PinError, match="cannot be empty"):
            write_pin("", tmp_path)

    def test_write_failure(self, tmp_path: Path) -> None:
        """An unwritable location is a PinError."""
        with pytest.raises(PinError, match="Failed to write"):
            write_pin("9.0.100", tmp_path / "does-not-exist")


class TestReadPin:
    """Tests for read_pin."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """No global.json means no pin."""
        assert read_pin(tmp_path) is None

    def test_reads_version(self, tmp_path: Path) -> None:
        """The pinned version is returned; extra keys are tolerated."""
        (tmp_path / "global.json").write_text(
            json.dumps({"sdk": {"version": "8.0.406"}, "msbuild-sdks": {}})
        )

        pin = read_pin(tmp_path)

        assert pin is not None
        assert pin.sdk.version == "8.0.406"

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises PinError."""
        (tmp_path / "global.json").write_text("{not json")

        with pytest.raises(PinError, match="Invalid JSON"):
            read_pin(tmp_path)

    def test_missing_sdk_version(self, tmp_path: Path) -> None:
        """A document without sdk.version raises PinError."""
        (tmp_path / "global.json").write_text('{"sdk": {}}')

        with pytest.raises(PinError, match="Invalid pin document"):
            read_pin(tmp_path)
