"""Convenience exports for ORM models."""

from .run import Run, UTCDateTime, utcnow

__all__ = ["Run", "UTCDateTime", "utcnow"]
