"""
Run with: python -m imperialcalc
"""
from __future__ import annotations

import logging
import sys

from imperialcalc.app.application import create_app
from imperialcalc.app.ui.main_window import MainWindow
from imperialcalc.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    # Use logging.DEBUG to see rejected tokens during development
    setup_logging(level=logging.INFO)

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
