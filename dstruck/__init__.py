"""Double-struck text conversion toolkit."""

__version__ = "0.1.0"
