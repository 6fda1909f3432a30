"""Ping result types, terminal drawing helpers and small utilities."""

__version__ = "0.1.0"