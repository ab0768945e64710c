"""Containers, 64-bit hash functions, a growable string and an automaton-based regex compiler."""

__version__ = "0.1.0"