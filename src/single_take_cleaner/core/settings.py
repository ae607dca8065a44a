"""Runtime settings passed by the caller to :func:`scan`.

Nothing is read from or written to disk. The UI builds one instance with
the defaults below and derives copies as the user changes the controls.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from single_take_cleaner.core.patterns import PatternVariant, parse_variant
from single_take_cleaner.core.sorter import DEFAULT_TRASH_FOLDER_NAME, get_trash_dir


def get_default_camera_dir() -> Path:
    """Get the default camera folder (``~/DCIM/Camera``)."""
    return Path.home() / "DCIM" / "Camera"


@dataclass(frozen=True)
class CleanerSettings:
    """Immutable cleaner settings.

    Attributes:
        source_dir: Camera folder to scan.
        trash_folder_name: Relative name of the trash subfolder.
        pattern: Active naming convention.
        dry_run: Report only, move nothing.
    """

    source_dir: Path = field(default_factory=get_default_camera_dir)
    trash_folder_name: str = DEFAULT_TRASH_FOLDER_NAME
    pattern: PatternVariant = PatternVariant.IMG_PREFIXED
    dry_run: bool = True

    def __post_init__(self) -> None:
        # Raises ValueError for empty or absolute names
        get_trash_dir(self.source_dir, self.trash_folder_name)

    @property
    def trash_dir(self) -> Path:
        return get_trash_dir(self.source_dir, self.trash_folder_name)

    def with_overrides(self, **changes: Any) -> CleanerSettings:
        """Return a copy with some fields replaced.

        ``source_dir`` may be given as a string and ``pattern`` as any value
        accepted by :func:`parse_variant`.

        Raises:
            ValueError: If a value is invalid.
        """
        if "source_dir" in changes:
            changes["source_dir"] = Path(changes["source_dir"]).expanduser()
        if "pattern" in changes:
            changes["pattern"] = parse_variant(changes["pattern"])
        return replace(self, **changes)
