"""Allow running as ``python -m pgscript``."""

import sys

from pgscript.cli import main

sys.exit(main())
