"""Settlers hex board: topology, randomized setup and placement rules."""

__version__ = "0.1.0"
