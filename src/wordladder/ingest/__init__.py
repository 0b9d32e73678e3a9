"""Loaders that turn adjacency-list text files into graphs."""
