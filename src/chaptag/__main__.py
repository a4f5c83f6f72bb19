"""Allow ``python -m chaptag``."""

import sys

from chaptag.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
