"""python -m barrelcheck."""

import sys

from barrelcheck.presentation.cli import main

sys.exit(main())
