"""kattis_py - test solutions locally and submit them to Kattis."""

__version__ = "1.0.0"
