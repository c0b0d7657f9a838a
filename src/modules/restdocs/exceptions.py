"""REST Docs exceptions.

Raised while generating documentation snippets from a test call.  They are
never caught inside this package: a failing snippet fails the test that
produced it.
"""

from __future__ import annotations


class RestDocsError(Exception):
    """Base class for documentation generation failures."""


class FieldNotFoundError(RestDocsError, LookupError):
    """A constraint look-up named a field path the model does not declare."""

    def __init__(self, model: type, path: str) -> None:
        super().__init__(f"{model.__name__} has no field '{path}'.")
        self.model = model
        self.path = path


class SnippetError(RestDocsError):
    """The documented fields or parameters do not match the recorded call."""
