"""Contour tracing of black-and-white images and their output as EPS polylines or Bézier curves."""

__version__ = "0.1.0"
__all__ = ["bezier", "cli", "contours", "geom2d"]