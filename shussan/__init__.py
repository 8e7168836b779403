"""Shussan Calc - Japanese maternity benefit (出産手当金) calculator."""

__version__ = "0.1.0"
