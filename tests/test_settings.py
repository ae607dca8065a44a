"""Tests for core/settings.py — runtime settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from single_take_cleaner.core.patterns import PatternVariant
from single_take_cleaner.core.settings import CleanerSettings, get_default_camera_dir


class TestCleanerSettings:
    """Tests for CleanerSettings dataclass."""

    def test_defaults(self) -> None:
        """Defaults should be safe: dry run, pattern A, SingleTake_Trash."""
        settings = CleanerSettings()

        assert settings.source_dir == get_default_camera_dir()
        assert settings.trash_folder_name == "SingleTake_Trash"
        assert settings.pattern is PatternVariant.IMG_PREFIXED
        assert settings.dry_run is True

    def test_default_camera_dir(self) -> None:
        """Default camera dir is ~/DCIM/Camera."""
        assert get_default_camera_dir() == Path.home() / "DCIM" / "Camera"

    def test_trash_dir(self, tmp_path: Path) -> None:
        """trash_dir combines source dir and folder name."""
        settings = CleanerSettings(source_dir=tmp_path, trash_folder_name="Bin")

        assert settings.trash_dir == tmp_path / "Bin"

    def test_immutable(self) -> None:
        """Settings should be frozen."""
        settings = CleanerSettings()

        with pytest.raises(AttributeError):
            settings.dry_run = False  # type: ignore[misc]

    def test_with_overrides(self, tmp_path: Path) -> None:
        """with_overrides converts strings and returns a new instance."""
        settings = CleanerSettings()

        updated = settings.with_overrides(source_dir=str(tmp_path), pattern="B", dry_run=False)

        assert updated.source_dir == tmp_path
        assert updated.pattern is PatternVariant.DATE_TIME
        assert updated.dry_run is False
        assert settings.dry_run is True

    def test_invalid_trash_name(self) -> None:
        """Empty trash folder names are rejected."""
        with pytest.raises(ValueError):
            CleanerSettings(trash_folder_name="")

    def test_trash_name_outside_source(self) -> None:
        """Trash folder names with .. segments are rejected."""
        with pytest.raises(ValueError, match="inside the source directory"):
            CleanerSettings(trash_folder_name="../Trash")

    def test_invalid_pattern(self) -> None:
        """Unknown pattern names are rejected."""
        with pytest.raises(ValueError):
            CleanerSettings().with_overrides(pattern="Z")
