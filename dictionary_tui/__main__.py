"""Allow running the package with ``python -m dictionary_tui``."""

import sys

from dictionary_tui.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
