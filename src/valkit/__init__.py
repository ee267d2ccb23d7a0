"""valkit — validated values and tagged variants, with a small CLI."""

__version__ = "0.1.0"
