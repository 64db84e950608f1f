"""lexwatch - job-progress monitoring and error classification for the legal basis API."""

__version__ = "0.1.0"
