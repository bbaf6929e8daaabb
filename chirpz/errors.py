"""Exception types raised by chirpz.

All errors derive from :class:`CztError`, itself a ``ValueError``, so callers
that already guard numeric code with ``except ValueError`` keep working.
"""

from __future__ import annotations


class CztError(ValueError):
    """Base class for chirp z-transform validation failures."""


class InvalidTransformSize(CztError):
    """Input length N or output length M is not a positive integer."""


class DegenerateContour(CztError):
    """Contour start point A or step ratio W is zero or not finite."""


class LengthMismatch(CztError):
    """A caller-supplied buffer, scratch region or plan has the wrong length."""


__all__ = ["CztError", "InvalidTransformSize", "DegenerateContour", "LengthMismatch"]
