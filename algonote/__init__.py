"""Algorithms and data structures for competitive programming: segment trees,
string matching, sequences, geometry, graphs, number theory and linear algebra."""

__version__ = "0.1.0"