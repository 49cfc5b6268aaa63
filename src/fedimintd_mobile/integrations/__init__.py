"""Integrations with the world outside this process."""
