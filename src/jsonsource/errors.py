# src/jsonsource/errors.py
from __future__ import annotations


class JsonSourceError(RuntimeError):
    pass


class MalformedDocumentError(JsonSourceError, ValueError):
    """Il testo del campione non è JSON valido."""


class UnsupportedRootError(JsonSourceError):
    pass


class InvalidNameError(JsonSourceError):
    pass


class TypeCollisionError(JsonSourceError):
    """Two declarations want the same class name with different shapes."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"type name collision on '{name}': {reason}")


class DocumentTooDeepError(JsonSourceError):
    pass


class SourceLoadError(JsonSourceError):
    pass
