"""delve - a terminal Gopher client."""

__version__ = "0.6.0"
