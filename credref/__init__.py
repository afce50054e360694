"""credref: credential-reference resolution for control-plane tenants."""

__version__ = "0.1.0"
