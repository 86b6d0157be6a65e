"""Entry point for ``python -m source_explorer``."""

import sys

from source_explorer import main

if __name__ == "__main__":
    sys.exit(main())
