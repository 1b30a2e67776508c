"""Weighted undirected graphs with search-tree and spanning-tree algorithms."""

__version__ = "0.1.0"