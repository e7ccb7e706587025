"""Forward and inverse cartographic map projections with shared helpers."""

__version__ = "0.1.0"

__all__ = ["common", "conic", "cylindrical", "goode", "alaska"]