"""Allow running as ``python -m hhash``."""

import sys

from hhash.cli import main

sys.exit(main())
