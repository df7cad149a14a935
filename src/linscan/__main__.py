"""Allow ``python -m linscan``."""

import sys

from linscan.cli import main

sys.exit(main())
