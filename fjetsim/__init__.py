"""Fighter jet flight model with cameras, meshes, profiling and input routing."""

__version__ = "1.0.0"