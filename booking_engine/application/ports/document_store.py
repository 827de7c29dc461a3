from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DocumentStorePort(ABC):
    """Key -> record store addressed by collection name and document id.

    Documents are plain dicts; returned documents always carry their ``id``.
    Implementations raise ``StoreUnavailableError`` when the backend fails.
    """

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(
        self,
        collection: str,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def query(
        self,
        collection: str,
        field: str,
        value: Any,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return documents whose ``field`` equals ``value``."""
        raise NotImplementedError

    @abstractmethod
    def insert(self, collection: str, data: dict[str, Any], doc_id: str | None = None) -> str:
        """Insert a document. Returns the generated (or given) id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> bool:
        """Merge ``changes`` into the document. Returns False if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def append_item(
        self,
        collection: str,
        doc_id: str,
        field: str,
        item: dict[str, Any],
        changes: dict[str, Any] | None = None,
    ) -> bool:
        """
        Atomically append ``item`` to the list under ``field`` and merge ``changes``.
        Returns False if the document does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_item(
        self,
        collection: str,
        doc_id: str,
        field: str,
        item_id: str,
        changes: dict[str, Any] | None = None,
    ) -> bool:
        """
        Atomically drop the list item whose ``id`` equals ``item_id`` and merge ``changes``.
        A missing item is not an error. Returns False only if the document does not exist.
        """
        raise NotImplementedError
