"""Plain-text rendering of scan reports for the result panel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from single_take_cleaner.core.sorter import ScanFailure

if TYPE_CHECKING:
    from single_take_cleaner.core.sorter import ScanReport

IDLE_BUTTON_TEXT = "Start scan"
WAITING_TEXT = "Scanning, please wait..."


def progress_message(dry_run: bool) -> str:
    """Label shown on the clean button while a scan runs."""
    return "Simulating scan..." if dry_run else "Moving files..."


def _format_failure(report: ScanReport) -> str:
    if report.failure is ScanFailure.DIRECTORY_NOT_FOUND:
        return f"Error: camera folder not found: {report.source_dir}"
    if report.failure is ScanFailure.DIRECTORY_UNREADABLE:
        return f"Error: cannot read camera folder {report.source_dir}: {report.failure_reason}"
    return f"Error: could not create trash folder {report.trash_dir}: {report.failure_reason}"


def _format_dry_run(report: ScanReport) -> str:
    lines = [f"[Dry run] Found {report.matched_count} file(s) that can be moved:", ""]
    if report.matched_count == 0:
        lines.append("No matching files found.")
    else:
        lines.extend(report.matched_names)
    return "\n".join(lines)


def _format_move(report: ScanReport) -> str:
    lines = [
        f"[Move] Moving {report.matched_count} file(s) to the trash folder...",
        "",
        "Done!",
        f"Moved: {report.moved_count} file(s)",
        f"Failed: {report.failed_count} file(s)",
        f"Files moved to: {report.trash_dir}",
    ]
    failures = [outcome for outcome in report.outcomes if not outcome.ok]
    if failures:
        lines.append("")
        lines.extend(f"{outcome.name}: {outcome.reason}" for outcome in failures)
    return "\n".join(lines)


def format_report(report: ScanReport) -> str:
    """Render a report as the text shown to the user.

    Args:
        report: Result of :func:`~single_take_cleaner.core.sorter.scan`.

    Returns:
        Multi-line summary.
    """
    if not report.ok:
        return _format_failure(report)
    if report.is_dry_run:
        return _format_dry_run(report)
    return _format_move(report)
