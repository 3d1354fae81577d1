"""Shared test setup."""

import os

# ##>: Render off-screen so the play module imports without a display.
os.environ.setdefault("MPLBACKEND", "Agg")
