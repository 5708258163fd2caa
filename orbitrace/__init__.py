"""Fixed-point arithmetic, vectors, noise, terrain colouring and ray intersections for a planetary path tracer."""

__version__ = "0.1.0"