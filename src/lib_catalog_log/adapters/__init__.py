"""Adapters for sinks, catalog files and environment settings."""
