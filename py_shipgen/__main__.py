"""Allow ``python -m py_shipgen``."""

import sys

from .cli import main

sys.exit(main())
