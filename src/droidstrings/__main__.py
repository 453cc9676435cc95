"""Allow ``python -m droidstrings``."""

import sys

from droidstrings.cli import main

sys.exit(main())
