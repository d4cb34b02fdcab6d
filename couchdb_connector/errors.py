from __future__ import annotations

"""Exceptions raised for caller contract violations and failed id generation.

HTTP-level failures are not exceptions; they come back as error ``Result``
values. Transport faults propagate as ``httpx.TransportError``.
"""

from .models import Result


class MissingDocumentIdError(ValueError):
    """Raised when a document to be updated carries no top-level ``_id``."""

    def __init__(self) -> None:
        super().__init__('the document to be updated must contain an "_id" field')


class UuidFetchError(RuntimeError):
    """Raised when CouchDB cannot supply a uuid for a generated document id."""

    def __init__(self, message: str, result: Result) -> None:
        """Keep the uuid response so callers can inspect what came back."""

        super().__init__(message)
        self.result = result


class MissingRevisionError(RuntimeError):
    """Raised when a document lookup succeeds but carries no ``_rev``."""

    def __init__(self, message: str, result: Result) -> None:
        super().__init__(message)
        self.result = result
