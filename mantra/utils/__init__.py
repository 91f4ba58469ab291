"""Utility subpackages for mantra-cli."""
