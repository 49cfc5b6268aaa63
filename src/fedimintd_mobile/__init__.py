"""Bootstrap and backend verification for fedimintd on mobile devices."""

__version__ = "0.1.0"
