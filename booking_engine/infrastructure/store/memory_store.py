from __future__ import annotations

import copy
import threading
import uuid
from typing import Any

from booking_engine.application.ports.document_store import DocumentStorePort


class MemoryDocumentStore(DocumentStorePort):
    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(name, {})

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        with self._lock:
            doc = self._collection(collection).get(doc_id)
            return _with_id(doc_id, doc) if doc is not None else None

    def list_all(
        self,
        collection: str,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        with self._lock:
            docs = [_with_id(doc_id, doc) for doc_id, doc in self._collection(collection).items()]
        return sort_documents(docs, order_by, descending)

    def query(
        self,
        collection: str,
        field: str,
        value: Any,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        with self._lock:
            docs = [
                _with_id(doc_id, doc)
                for doc_id, doc in self._collection(collection).items()
                if doc.get(field) == value
            ]
        return sort_documents(docs, order_by, descending)

    def insert(self, collection: str, data: dict[str, Any], doc_id: str | None = None) -> str:
        new_id = doc_id or uuid.uuid4().hex
        doc = copy.deepcopy(data)
        doc.pop("id", None)
        with self._lock:
            self._collection(collection)[new_id] = doc
        return new_id

    def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> bool:
        with self._lock:
            doc = self._collection(collection).get(doc_id)
            if doc is None:
                return False
            doc.update(copy.deepcopy(changes))
            doc.pop("id", None)
            return True

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            return self._collection(collection).pop(doc_id, None) is not None

    def append_item(
        self,
        collection: str,
        doc_id: str,
        field: str,
        item: dict[str, Any],
        changes: dict[str, Any] | None = None,
    ) -> bool:
        with self._lock:
            doc = self._collection(collection).get(doc_id)
            if doc is None:
                return False
            items = list(doc.get(field) or [])
            items.append(copy.deepcopy(item))
            doc[field] = items
            doc.update(copy.deepcopy(changes or {}))
            return True

    def remove_item(
        self,
        collection: str,
        doc_id: str,
        field: str,
        item_id: str,
        changes: dict[str, Any] | None = None,
    ) -> bool:
        with self._lock:
            doc = self._collection(collection).get(doc_id)
            if doc is None:
                return False
            doc[field] = [i for i in doc.get(field) or [] if i.get("id") != item_id]
            doc.update(copy.deepcopy(changes or {}))
            return True


def _with_id(doc_id: str, doc: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(doc)
    result["id"] = doc_id
    return result


def sort_documents(docs: list[dict[str, Any]], order_by: str | None, descending: bool) -> list[dict[str, Any]]:
    if not order_by:
        return docs
    # Documents missing the field sort last in ascending order.
    return sorted(
        docs,
        key=lambda d: (d.get(order_by) is None, d.get(order_by) if d.get(order_by) is not None else ""),
        reverse=descending,
    )
