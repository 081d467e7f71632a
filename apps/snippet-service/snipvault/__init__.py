"""SnipVault: owner-scoped code snippet service and client."""

__version__ = "0.1.0"
