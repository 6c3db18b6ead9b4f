"""
Logos: Ancient Greek and Latin word lookup.

This package resolves inflected word forms to their dictionary headwords via the
Perseids Morpheus service and renders cleaned Wiktionary definitions for them.
"""

__version__ = "0.1.0"
