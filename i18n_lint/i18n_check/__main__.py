"""Entry point for running the i18n check as a module."""

import sys

from .i18n_check import main

if __name__ == "__main__":
    sys.exit(main())
