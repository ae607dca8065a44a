"""Classify and relocate Single Take files in one directory.

Only immediate children of the source directory are considered. Matched
files are renamed into a trash subfolder, never deleted.
A file already present in the trash folder is left alone and the move is
reported as failed. The check runs just before the rename, so a file created
in between by another process is not protected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from single_take_cleaner.core.errors import (
    DirectoryNotFoundError,
    MoveFailedError,
    TrashDirectoryCreateError,
)
from single_take_cleaner.core.patterns import ClassificationRule, PatternVariant

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_TRASH_FOLDER_NAME = "SingleTake_Trash"


class ScanMode(Enum):
    """What a scan does with the matched files."""

    DRY_RUN = "dry_run"
    MOVE = "move"


class MoveStatus(Enum):
    """Result of one relocation attempt."""

    MOVED = "moved"
    FAILED = "failed"


class ScanFailure(Enum):
    """Directory level conditions that abort a whole scan."""

    DIRECTORY_NOT_FOUND = "directory_not_found"
    DIRECTORY_UNREADABLE = "directory_unreadable"
    TRASH_DIRECTORY_CREATE_FAILED = "trash_directory_create_failed"


@dataclass(frozen=True)
class Entry:
    """A filesystem object observed in the source directory.

    Attributes:
        name: File name, unchanged for the duration of the scan.
        path: Absolute path to the entry.
        is_directory: True for subdirectories (never matched).
    """

    name: str
    path: Path
    is_directory: bool = False

    @classmethod
    def from_path(cls, path: Path) -> Entry:
        """Create an Entry from a path inside the source directory."""
        return cls(name=path.name, path=path.absolute(), is_directory=path.is_dir())


@dataclass(frozen=True)
class MoveOutcome:
    """Per-file result of a move attempt.

    Attributes:
        name: File name that was processed.
        status: MOVED or FAILED.
        destination: Target path inside the trash folder.
        reason: Failure cause, None when moved.
    """

    name: str
    status: MoveStatus
    destination: Path
    reason: str | None = None

    @classmethod
    def moved(cls, name: str, destination: Path) -> MoveOutcome:
        return cls(name=name, status=MoveStatus.MOVED, destination=destination)

    @classmethod
    def failed(cls, name: str, destination: Path, reason: str) -> MoveOutcome:
        return cls(name=name, status=MoveStatus.FAILED, destination=destination, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is MoveStatus.MOVED


@dataclass
class ScanReport:
    """Result of one invocation of :func:`scan`.

    Attributes:
        mode: DRY_RUN or MOVE.
        source_dir: Directory that was scanned.
        trash_dir: Trash subfolder inside ``source_dir``.
        pattern: Naming convention used for classification.
        matched_names: Matched file names, in listing order.
        outcomes: One MoveOutcome per matched file (move mode only).
        failure: Directory level condition that aborted the scan, if any.
        failure_reason: Details for ``failure``.
    """

    mode: ScanMode
    source_dir: Path
    trash_dir: Path
    pattern: PatternVariant = PatternVariant.IMG_PREFIXED
    matched_names: list[str] = field(default_factory=list)
    outcomes: list[MoveOutcome] = field(default_factory=list)
    failure: ScanFailure | None = None
    failure_reason: str | None = None

    @property
    def matched_count(self) -> int:
        """Number of files that satisfied the rule."""
        return len(self.matched_names)

    @property
    def moved_count(self) -> int:
        """Number of files moved into the trash folder."""
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed_count(self) -> int:
        """Number of files that could not be moved."""
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def ok(self) -> bool:
        """True if the scan was not aborted."""
        return self.failure is None

    @property
    def is_dry_run(self) -> bool:
        return self.mode is ScanMode.DRY_RUN


def _validate_trash_folder_name(trash_folder_name: str) -> None:
    if not trash_folder_name or not trash_folder_name.strip():
        raise ValueError("Trash folder name must not be empty")
    if Path(trash_folder_name).is_absolute():
        raise ValueError(f"Trash folder name must be relative: {trash_folder_name}")
    # Path() drops inner "." segments, so split the raw string
    if any(part in (".", "..") for part in trash_folder_name.replace("\\", "/").split("/")):
        raise ValueError(f"Trash folder name must stay inside the source directory: {trash_folder_name}")


def get_trash_dir(source_dir: Path, trash_folder_name: str = DEFAULT_TRASH_FOLDER_NAME) -> Path:
    """Get the path of the trash subfolder.

    Args:
        source_dir: The scanned directory.
        trash_folder_name: Relative name of the trash folder.

    Returns:
        Path to the trash folder (may not exist yet).
    """
    _validate_trash_folder_name(trash_folder_name)
    return source_dir / trash_folder_name


def check_source_dir(source_dir: Path) -> Path:
    """Make sure ``source_dir`` is an existing directory.

    Raises:
        DirectoryNotFoundError: If the path is missing or not a directory.
    """
    if not source_dir.exists():
        raise DirectoryNotFoundError(f"Directory does not exist: {source_dir}")
    if not source_dir.is_dir():
        raise DirectoryNotFoundError(f"Path is not a directory: {source_dir}")
    return source_dir


def ensure_trash_dir(source_dir: Path, trash_folder_name: str = DEFAULT_TRASH_FOLDER_NAME) -> Path:
    """Create the trash folder if it is absent.

    Args:
        source_dir: The scanned directory.
        trash_folder_name: Relative name, may contain several segments.

    Returns:
        Path to the existing trash folder.

    Raises:
        TrashDirectoryCreateError: If the folder cannot be created.
    """
    trash_dir = get_trash_dir(source_dir, trash_folder_name)
    try:
        trash_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise TrashDirectoryCreateError(f"Cannot create trash folder {trash_dir}: {e}") from e
    return trash_dir


def list_entries(source_dir: Path) -> list[Entry]:
    """List the immediate children of ``source_dir``, sorted by name."""
    return sorted((Entry.from_path(child) for child in source_dir.iterdir()), key=lambda e: e.name)


def classify(entries: Iterable[Entry], rule: ClassificationRule) -> list[Entry]:
    """Keep the files matched by ``rule``, preserving order.

    Directories are skipped and never descended into.
    """
    return [entry for entry in entries if not entry.is_directory and rule.matches(entry.name)]


def move_to_trash(entry: Entry, trash_dir: Path) -> Path:
    """Rename one file into the trash folder.

    An existing destination is refused rather than overwritten. The check
    and the rename are separate calls, so this is not race free.

    Args:
        entry: Matched file.
        trash_dir: Existing trash folder.

    Returns:
        The new path of the file.

    Raises:
        MoveFailedError: If the source vanished, the destination is taken,
            or the rename itself fails.
    """
    dst = trash_dir / entry.name

    if not entry.path.exists():
        raise MoveFailedError(entry.name, "source file no longer exists")

    if dst.exists():
        raise MoveFailedError(entry.name, f"destination already exists: {dst}")

    try:
        entry.path.rename(dst)
    except OSError as e:
        raise MoveFailedError(entry.name, str(e)) from e

    return dst


def scan(
    source_dir: Path | str,
    trash_folder_name: str = DEFAULT_TRASH_FOLDER_NAME,
    dry_run: bool = True,
    pattern: PatternVariant = PatternVariant.IMG_PREFIXED,
) -> ScanReport:
    """Scan ``source_dir`` for Single Take files and optionally move them.

    Directory level failures are returned in the report instead of raised.
    A file that fails to move is recorded and the batch continues.

    Args:
        source_dir: Camera folder to scan.
        trash_folder_name: Relative name of the trash subfolder.
        dry_run: If True, only report matches.
        pattern: Naming convention used for classification.

    Returns:
        ScanReport describing the run.

    Raises:
        ValueError: If ``trash_folder_name`` is empty, absolute, or leaves
            ``source_dir``.
    """
    source_dir = Path(source_dir).absolute()
    trash_dir = get_trash_dir(source_dir, trash_folder_name)
    report = ScanReport(
        mode=ScanMode.DRY_RUN if dry_run else ScanMode.MOVE,
        source_dir=source_dir,
        trash_dir=trash_dir,
        pattern=pattern,
    )

    try:
        check_source_dir(source_dir)
    except DirectoryNotFoundError as e:
        logger.warning(f"Scan aborted: {e}")
        report.failure = ScanFailure.DIRECTORY_NOT_FOUND
        report.failure_reason = str(e)
        return report

    try:
        ensure_trash_dir(source_dir, trash_folder_name)
    except TrashDirectoryCreateError as e:
        logger.warning(f"Scan aborted: {e}")
        report.failure = ScanFailure.TRASH_DIRECTORY_CREATE_FAILED
        report.failure_reason = str(e)
        return report

    try:
        entries = list_entries(source_dir)
    except OSError as e:
        logger.warning(f"Scan aborted: cannot list {source_dir}: {e}")
        report.failure = ScanFailure.DIRECTORY_UNREADABLE
        report.failure_reason = str(e)
        return report

    rule = ClassificationRule.for_variant(pattern)
    matched = classify(entries, rule)
    report.matched_names = [entry.name for entry in matched]

    if dry_run:
        logger.info(f"Dry run: {report.matched_count} file(s) match in {source_dir}")
        return report

    for entry in matched:
        try:
            dst = move_to_trash(entry, trash_dir)
        except MoveFailedError as e:
            logger.warning(str(e))
            report.outcomes.append(MoveOutcome.failed(entry.name, trash_dir / entry.name, e.reason))
            continue
        logger.debug(f"Moved: {entry.name}")
        report.outcomes.append(MoveOutcome.moved(entry.name, dst))

    logger.info(
        f"Moved {report.moved_count} of {report.matched_count} file(s) to {trash_dir}"
        f" ({report.failed_count} failed)"
    )
    return report
