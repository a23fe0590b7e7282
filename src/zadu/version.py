"""Version information for ZADU."""

__version__ = "0.1.0"
