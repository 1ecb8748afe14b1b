"""Member offer engine: rule evaluation and multi-campaign offer aggregation."""

__version__ = "0.1.0"
