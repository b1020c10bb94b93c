"""Allow ``python -m gstlatplot``."""

import sys

from .cli import main

sys.exit(main())
