"""Entry point for ``python -m bytecopy``."""

import sys

from .cli import main

sys.exit(main())
