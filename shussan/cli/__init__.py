"""Shussan Calc CLI."""
