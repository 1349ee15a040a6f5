"""Core configuration, security and observability helpers."""
