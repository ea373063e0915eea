"""A clicker game: earn gold by clicking and spend it on upgrades and an auto-clicker."""

__version__ = "0.1.0"