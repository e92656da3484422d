"""YiDict: command-line dictionary lookups over interchangeable backends."""

__version__ = "0.1.0"
