"""Allow running the catalog command line with ``python -m webradios``."""

import sys

from .main import main

sys.exit(main())
