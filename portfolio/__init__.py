"""Portfolio backend: token authentication plus project and skill management."""

__version__ = "0.1.0"
