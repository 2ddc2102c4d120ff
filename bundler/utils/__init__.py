"""Logging configuration and user-facing error messages."""
