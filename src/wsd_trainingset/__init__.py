"""Unlabelled word-sense training set extraction."""

__version__ = "0.1.0"
