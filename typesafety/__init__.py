"""Explicit, checked building blocks: constraints, object and function references, output parameters and variants."""

__version__ = "0.1.0"