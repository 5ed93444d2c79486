"""Entry point for `python -m placeholder_view.qt`."""

from __future__ import annotations

import sys

from . import main

sys.exit(main())
