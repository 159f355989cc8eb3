"""Full-truckload delivery planning service."""

__version__ = "0.1.0"
