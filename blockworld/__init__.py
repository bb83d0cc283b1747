"""Voxel block world: chunks, texture atlases, block geometry and model import."""

__version__ = "0.1.0"