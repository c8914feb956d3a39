"""A very small compiler for a subset of C that emits x86-64 assembly."""

__version__ = "0.1.0"
__all__ = ["__version__"]