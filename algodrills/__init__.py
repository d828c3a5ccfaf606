"""Classic interview algorithms and data structures, one module per topic."""

__version__ = "0.1.0"