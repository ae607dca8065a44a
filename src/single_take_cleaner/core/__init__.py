"""Core business logic for Single Take Cleaner."""

from single_take_cleaner.core.errors import (
    CleanerError,
    DirectoryNotFoundError,
    MoveFailedError,
    TrashDirectoryCreateError,
)
from single_take_cleaner.core.patterns import (
    EXCLUDED_SUFFIX,
    SINGLE_TAKE_EXTENSIONS,
    ClassificationRule,
    PatternVariant,
    is_single_take_file,
    parse_variant,
)
from single_take_cleaner.core.sorter import (
    DEFAULT_TRASH_FOLDER_NAME,
    Entry,
    MoveOutcome,
    MoveStatus,
    ScanFailure,
    ScanMode,
    ScanReport,
    check_source_dir,
    classify,
    ensure_trash_dir,
    get_trash_dir,
    list_entries,
    move_to_trash,
    scan,
)
from single_take_cleaner.core.settings import CleanerSettings, get_default_camera_dir

__all__ = [
    # errors
    "CleanerError",
    "DirectoryNotFoundError",
    "MoveFailedError",
    "TrashDirectoryCreateError",
    # patterns
    "EXCLUDED_SUFFIX",
    "SINGLE_TAKE_EXTENSIONS",
    "ClassificationRule",
    "PatternVariant",
    "is_single_take_file",
    "parse_variant",
    # sorter
    "DEFAULT_TRASH_FOLDER_NAME",
    "Entry",
    "MoveOutcome",
    "MoveStatus",
    "ScanFailure",
    "ScanMode",
    "ScanReport",
    "check_source_dir",
    "classify",
    "ensure_trash_dir",
    "get_trash_dir",
    "list_entries",
    "move_to_trash",
    "scan",
    # settings
    "CleanerSettings",
    "get_default_camera_dir",
]
