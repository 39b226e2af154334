"""Command-line interface."""
import sys

from trigmaster.app.main import main

if __name__ == "__main__":
    sys.exit(main())
