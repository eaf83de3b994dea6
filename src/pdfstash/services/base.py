"""BaseService — shared foundation for pdfstash services.

Every service receives a :class:`DocumentStore` at construction time, so
the managed directory is always an explicit handle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pdfstash.services.result import ServiceResult

if TYPE_CHECKING:
    from pdfstash.infrastructure.errors import DocumentStoreError
    from pdfstash.infrastructure.store import DocumentStore


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DocumentService(BaseService):
            def delete(self, name: str) -> ServiceResult:
                removed = self._store.delete(name)
                ...
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @staticmethod
    def _error(op: str, exc: DocumentStoreError) -> ServiceResult:
        """Translate a store exception into a failed ServiceResult."""
        return ServiceResult.failure(op, exc.code, str(exc))
