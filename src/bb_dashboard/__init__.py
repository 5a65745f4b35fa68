"""BB Dashboard - local API for the agent office dashboard."""

__version__ = "0.1.0"
