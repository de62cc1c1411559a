"""Dojo Draw: karate tournament grouping and Kumite bracket draws."""

__version__ = "0.1.0"
