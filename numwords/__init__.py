"""Spell out whole numbers in words from a number dictionary file."""

__version__ = "0.1.0"