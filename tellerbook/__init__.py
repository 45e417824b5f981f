"""Savings, checking and business accounts with file storage and a terminal teller."""

__version__ = "0.1.0"