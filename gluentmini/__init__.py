"""Tail a log file, keep lines matching keywords, print them and remember the read offset."""

__version__ = "0.1.0"