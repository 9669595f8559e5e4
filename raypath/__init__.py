"""A small Monte Carlo path tracer with BVH acceleration, textured materials and PPM output."""

__version__ = "0.1.0"