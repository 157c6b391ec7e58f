"""Gas-in-a-box simulation with an escape hole, energy statistics, scene geometry and HTML logging."""

__version__ = "0.1.0"

__all__ = ["__version__"]