"""Parse IP addresses with optional CIDR prefixes and compute address blocks."""

__version__ = "0.1.0"
__all__ = ["cidr", "parser"]