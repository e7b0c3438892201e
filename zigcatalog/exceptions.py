from __future__ import annotations


class CatalogException(Exception):
    """Base exception class"""


class DefinitionError(CatalogException):
    """A device definition is malformed and the table cannot be built"""

    def __init__(self, message: str, model: str | None = None):
        super().__init__(message)
        self.model = model


class AmbiguousConfigureError(DefinitionError):
    """A definition and its template both define a configure sequence"""


class DuplicateModelError(DefinitionError):
    """Two definitions resolve to the same model name"""


class DuplicateFingerprintError(DefinitionError):
    """Two definitions declare an identical fingerprint"""
