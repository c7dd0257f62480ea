"""API Routes"""

from . import health, segments

__all__ = ["health", "segments"]
