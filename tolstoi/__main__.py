"""Allow ``python -m tolstoi``."""

import sys

from tolstoi.cli import main

if __name__ == "__main__":
    sys.exit(main())
