"""Framework for hash functions, extendable-output functions and MACs built from block cores."""

__version__ = "0.10.3"