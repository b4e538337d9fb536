"""Publish markdown articles with front-matter to dev.to."""

__version__ = "0.1.0"
