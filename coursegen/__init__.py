"""Generate planar target courses of circular arcs, with a command to write their points."""

__version__ = "0.1.0"

__all__ = ["__version__"]