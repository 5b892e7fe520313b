"""A plain-text workspace of points, spheres and transformations, with an editor shell and geometry helpers."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "functions",
    "matrices",
    "parser",
    "points",
    "printer",
    "shapes",
    "solver",
    "transformations",
    "vectors",
    "workspace",
]