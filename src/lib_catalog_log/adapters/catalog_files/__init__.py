"""Catalog file loaders."""
