"""Example catalog helpers for ``lib_catalog_log``."""

from .generate import ExampleSpec, generate_examples

__all__ = [
    "ExampleSpec",
    "generate_examples",
]
