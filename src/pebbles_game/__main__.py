"""Allow `python -m pebbles_game`."""

import sys

from .cli import main

sys.exit(main())
