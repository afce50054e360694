"""Logging and metrics for credref."""
