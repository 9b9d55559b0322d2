"""Gamerie - terminal client with unified search over games, teams and players."""

__version__ = "0.1.0"
