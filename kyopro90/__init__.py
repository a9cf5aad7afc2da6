"""Solvers for classic competitive-programming problems and the data structures they use."""

__version__ = "0.1.0"