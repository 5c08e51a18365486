"""Command-line entry point: starts the calculator window."""
import sys

from imperialcalc.app.main import main

if __name__ == "__main__":
    sys.exit(main())
