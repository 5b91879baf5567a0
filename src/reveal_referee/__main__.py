"""Allow ``python -m reveal_referee``."""

import sys

from .cli import main

sys.exit(main())
