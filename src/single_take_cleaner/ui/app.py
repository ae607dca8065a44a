"""Main application entry point for NiceGUI desktop app."""

from __future__ import annotations

import logging

from nicegui import app, ui

from single_take_cleaner.ui.pages.cleaner import create_page


def run(*, native: bool = True, reload: bool = False) -> None:
    """Run the Single Take Cleaner application.

    Args:
        native: If True, run as native desktop app (pywebview).
        reload: If True, enable hot reload for development.
    """
    logging.basicConfig(
        level=logging.DEBUG if reload else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Configure app
    app.native.window_args["resizable"] = True
    app.native.start_args["debug"] = reload

    @ui.page("/")
    def index() -> None:
        """Main page."""
        ui.colors(primary="#4F46E5")  # Indigo
        create_page()

    ui.run(
        title="Single Take Cleaner",
        native=native,
        reload=reload,
        window_size=(720, 640),
        port=8766,
    )
