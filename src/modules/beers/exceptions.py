"""Beer domain exceptions.

Raised by the mapper and the Service Layer.  The API layer (Views) catches
these and translates them into appropriate HTTP responses.
"""

from __future__ import annotations


class BeerNotFound(Exception):
    """The requested beer does not exist."""


class ConversionError(ValueError):
    """A timestamp could not be converted to or from its textual form."""
