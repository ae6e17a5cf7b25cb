"""Deterministic Wikipedia RSS feeds.

Every subscriber to the same cadence sees the same article on the same UTC
calendar date, with no stored state.
"""

__version__ = "0.1.0"
