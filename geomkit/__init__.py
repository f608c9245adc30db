"""Euclidean and hyperbolic plane geometry: objects, view transformations and constructions."""

__version__ = "0.1.0"