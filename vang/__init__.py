"""Core of a voxel engine: chunks, worlds, raycasting, items, blueprints, lights, layers, events and a headless engine loop."""

__version__ = "0.1.0"