"""Wallet management backend: credentials, sessions and wallet provisioning."""

__version__ = "0.1.0"
