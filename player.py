from __future__ import annotations

# Process entry point: reads one board encoding and prints the chosen move.
# The logic lives under atropos_core/*.

import sys

from atropos_core.cli import main


if __name__ == '__main__':
    sys.exit(main())
