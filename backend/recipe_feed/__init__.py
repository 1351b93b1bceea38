"""
Recipe Feed
===========

Scrapes the Marley Spoon weekly menu into a canonical JSON recipe store.
"""

__version__ = "1.0.0"
