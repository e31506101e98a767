"""Allow ``python -m camlib``."""

import sys

from camlib.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
