"""Allow ``python -m exifmeta``."""

import sys

from exifmeta.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
