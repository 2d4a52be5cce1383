"""Entry point for `python -m letterboxed`."""

import sys

from letterboxed import main

sys.exit(main())
