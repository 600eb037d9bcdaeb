"""Entry point for ``python -m chunk_rules``."""

import sys

from chunk_rules.cli import main

sys.exit(main())
