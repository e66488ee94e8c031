"""Resample OBJ terrain meshes onto regular grids and export them as ARL triangle strips."""

__version__ = "0.1.0"