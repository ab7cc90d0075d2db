"""Trading journal and position-size calculator."""

__version__ = "0.1.0"
