"""Tests for ui/summary.py — report rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from single_take_cleaner.core.patterns import PatternVariant
from single_take_cleaner.core.sorter import DEFAULT_TRASH_FOLDER_NAME, scan
from single_take_cleaner.ui.summary import format_report, progress_message


class TestFormatReport:
    """Tests for format_report function."""

    def test_directory_not_found(self, tmp_path: Path) -> None:
        """Missing folder renders an error line."""
        missing = tmp_path / "Camera"

        text = format_report(scan(missing))

        assert text == f"Error: camera folder not found: {missing}"

    def test_trash_create_failed(self, tmp_path: Path) -> None:
        """Trash creation failure renders an error with the reason."""
        (tmp_path / DEFAULT_TRASH_FOLDER_NAME).write_text("in the way")

        text = format_report(scan(tmp_path))

        assert text.startswith("Error: could not create trash folder")

    def test_unreadable_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Listing failure renders an error with the reason."""

        def denied_iterdir(self: Path):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "iterdir", denied_iterdir)

        text = format_report(scan(tmp_path))

        assert text.startswith(f"Error: cannot read camera folder {tmp_path}:")
        assert "Permission denied" in text

    def test_dry_run_lists_names(self, tmp_path: Path) -> None:
        """Dry run lists every matched name."""
        (tmp_path / "20240101_120000_02.mp4").write_bytes(b"data")
        (tmp_path / "20240101_120000_03.jpg").write_bytes(b"data")

        text = format_report(scan(tmp_path, pattern=PatternVariant.DATE_TIME))
        lines = text.splitlines()

        assert lines[0] == "[Dry run] Found 2 file(s) that can be moved:"
        assert lines[2:] == ["20240101_120000_02.mp4", "20240101_120000_03.jpg"]

    def test_dry_run_empty(self, tmp_path: Path) -> None:
        """Dry run without matches says so."""
        text = format_report(scan(tmp_path))

        assert "Found 0 file(s)" in text
        assert text.endswith("No matching files found.")

    def test_move_summary(self, tmp_path: Path) -> None:
        """Move summary shows counts, trash location and failures."""
        (tmp_path / "IMG_a_01.jpg").write_bytes(b"data")
        (tmp_path / "IMG_b_02.jpg").write_bytes(b"data")
        trash = tmp_path / DEFAULT_TRASH_FOLDER_NAME
        trash.mkdir()
        (trash / "IMG_a_01.jpg").write_bytes(b"older")

        text = format_report(scan(tmp_path, dry_run=False))

        assert "[Move] Moving 2 file(s)" in text
        assert "Moved: 1 file(s)" in text
        assert "Failed: 1 file(s)" in text
        assert f"Files moved to: {trash}" in text
        assert "IMG_a_01.jpg: destination already exists" in text


class TestProgressMessage:
    """Tests for progress_message function."""

    def test_messages_differ_by_mode(self) -> None:
        """Dry run and move show different busy labels."""
        assert progress_message(True) == "Simulating scan..."
        assert progress_message(False) == "Moving files..."
