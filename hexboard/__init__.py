"""Spatial model of a hexagonal game board."""

__version__ = "0.1.0"
