"""Single Take Cleaner — move Galaxy "Single Take" burst files into a trash folder."""

__version__ = "0.1.0"


def main() -> None:
    """Entry point for the application."""
    from single_take_cleaner.ui.app import run

    run(native=True, reload=False)
