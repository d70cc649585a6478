"""evograph - evolution chain graph layout and condition formatting."""

__version__ = "0.1.0"
