"""Cleaner page — the only page of the application.

Lets the user pick the camera folder, choose the naming pattern, toggle
dry run, and move Single Take files into the trash folder.
"""

from __future__ import annotations

import asyncio
from html import escape
from pathlib import Path
from typing import TYPE_CHECKING

from nicegui import events, ui

from single_take_cleaner.core.patterns import PatternVariant
from single_take_cleaner.core.settings import CleanerSettings
from single_take_cleaner.ui.summary import (
    IDLE_BUTTON_TEXT,
    WAITING_TEXT,
    format_report,
    progress_message,
)

if TYPE_CHECKING:
    from single_take_cleaner.core.sorter import ScanReport


class CleanerPage:
    """Page for scanning a camera folder and moving Single Take files."""

    def __init__(self, settings: CleanerSettings | None = None) -> None:
        """Initialize the page state."""
        self._settings = settings or CleanerSettings()
        self._report: ScanReport | None = None
        self._running: bool = False

        # UI elements
        self._path_label: ui.label | None = None
        self._clean_button: ui.button | None = None
        self._dry_run_switch: ui.switch | None = None
        self._pattern_radio: ui.radio | None = None
        self._result_label: ui.label | None = None

    def build(self) -> None:
        """Build the page UI."""
        with ui.column().classes("w-full max-w-2xl mx-auto p-8 gap-6"):
            # Header
            ui.label("Single Take Cleaner").classes("text-3xl font-bold text-center w-full")
            ui.label("Move Single Take burst files to a trash folder").classes("text-gray-500 text-center w-full")

            ui.separator()

            # Folder selection
            with ui.card().classes("w-full"):
                ui.label("Camera folder").classes("text-lg font-semibold")

                with ui.row().classes("w-full items-center gap-4"):
                    self._path_label = ui.label(escape(str(self._settings.source_dir))).classes("flex-grow text-gray-600")
                    ui.button("Browse...", on_click=self._on_browse).props("outline")

            # Options
            with ui.card().classes("w-full"):
                ui.label("File name pattern").classes("text-lg font-semibold")
                self._pattern_radio = ui.radio(
                    {variant.value: variant.label for variant in PatternVariant},
                    value=self._settings.pattern.value,
                    on_change=self._on_pattern_change,
                )
                self._dry_run_switch = ui.switch(
                    "Dry run (only list files, move nothing)",
                    value=self._settings.dry_run,
                    on_change=self._on_dry_run_change,
                )

            with ui.row().classes("w-full justify-center"):
                self._clean_button = ui.button(IDLE_BUTTON_TEXT, on_click=self._on_clean)
                self._clean_button.props("color=primary size=lg")

            self._result_label = ui.label("").classes("w-full whitespace-pre-wrap font-mono text-sm")

    async def _on_browse(self) -> None:
        """Handle browse button click using the native folder picker."""
        import tkinter as tk
        from tkinter import filedialog

        root = tk.Tk()
        root.withdraw()
        root.attributes("-topmost", True)

        folder_path = filedialog.askdirectory(
            title="Select camera folder",
            initialdir=str(self._settings.source_dir),
            mustexist=True,
        )

        root.destroy()

        if folder_path:
            self._settings = self._settings.with_overrides(source_dir=Path(folder_path).resolve())
            if self._path_label:
                self._path_label.text = escape(str(self._settings.source_dir))
            self._report = None
            if self._result_label:
                self._result_label.text = ""

    def _on_pattern_change(self, event: events.ValueChangeEventArguments) -> None:
        self._settings = self._settings.with_overrides(pattern=event.value)

    def _on_dry_run_change(self, event: events.ValueChangeEventArguments) -> None:
        self._settings = self._settings.with_overrides(dry_run=bool(event.value))

    async def _on_clean(self) -> None:
        """Handle clean button click."""
        if self._running:
            return

        self._running = True
        settings = self._settings
        self._set_busy(True, progress_message(settings.dry_run))

        try:
            from single_take_cleaner.core.sorter import scan

            loop = asyncio.get_event_loop()
            self._report = await loop.run_in_executor(
                None,
                lambda: scan(
                    settings.source_dir,
                    settings.trash_folder_name,
                    dry_run=settings.dry_run,
                    pattern=settings.pattern,
                ),
            )
            if self._result_label:
                self._result_label.text = format_report(self._report)

        except Exception as e:
            ui.notify(f"Scan failed: {escape(str(e))}", type="negative")
            if self._result_label:
                self._result_label.text = ""

        finally:
            self._running = False
            self._set_busy(False)

    def _set_busy(self, busy: bool, message: str = "") -> None:
        """Disable the clean button and show the waiting text."""
        if self._clean_button:
            self._clean_button.set_enabled(not busy)
            self._clean_button.text = message if busy else IDLE_BUTTON_TEXT
        if busy and self._result_label:
            self._result_label.text = WAITING_TEXT


def create_page(settings: CleanerSettings | None = None) -> CleanerPage:
    """Create and build the cleaner page."""
    page = CleanerPage(settings)
    page.build()
    return page
