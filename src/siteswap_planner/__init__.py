"""Siteswap juggling pattern validation and beat-level flight planning."""

__version__ = "0.1.0"
