"""Allow ``python -m relink``."""

import sys

from relink.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
