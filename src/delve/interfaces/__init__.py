"""Abstract interfaces for the Gopher client."""

from .console import Console
from .transport import Transport

__all__ = ["Console", "Transport"]
