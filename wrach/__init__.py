"""2D pixel physics simulation: spatial binning, particle packing and a per-cell physics step."""

__version__ = "0.1.0"

__all__ = ["__version__"]