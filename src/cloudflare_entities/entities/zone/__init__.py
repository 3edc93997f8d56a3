"""Entity package: Zone."""

from .entity import Zone

__all__ = ["Zone"]
