"""Core configuration and time utilities."""
