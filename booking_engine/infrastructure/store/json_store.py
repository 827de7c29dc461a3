from __future__ import annotations

import json
import logging
import threading
import uuid
from pathlib import Path
from typing import Any

from booking_engine.application.exceptions import StoreUnavailableError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.infrastructure.store.memory_store import sort_documents


class JsonDocumentStore(DocumentStorePort):
    """One JSON file per collection, rewritten atomically under a per-collection lock."""

    def __init__(self, data_dir: str = "./data/store") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, collection: str) -> threading.Lock:
        """Get or create a lock for a collection."""
        with self._lock_lock:
            if collection not in self._locks:
                self._locks[collection] = threading.Lock()
            return self._locks[collection]

    def _get_file_path(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def _load(self, collection: str) -> dict[str, dict[str, Any]]:
        """Load all documents of a collection, empty if the file does not exist yet."""
        file_path = self._get_file_path(collection)
        if not file_path.exists():
            return {}
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            self._logger.error(
                "Failed to read collection", extra={"collection": collection, "reason": str(e)}
            )
            raise StoreUnavailableError(f"collection {collection!r} could not be read") from e
        return data.get("documents", {})

    def _save(self, collection: str, documents: dict[str, dict[str, Any]]) -> None:
        """Save collection to JSON file atomically."""
        file_path = self._get_file_path(collection)
        temp_path = file_path.with_suffix(".json.tmp")
        payload = {"collection": collection, "documents": documents, "version": 1}

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            self._logger.error(
                "Failed to write collection", extra={"collection": collection, "reason": str(e)}
            )
            raise StoreUnavailableError(f"collection {collection!r} could not be written") from e

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        with self._get_lock(collection):
            doc = self._load(collection).get(doc_id)
        if doc is None:
            return None
        return {**doc, "id": doc_id}

    def list_all(
        self,
        collection: str,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        with self._get_lock(collection):
            documents = self._load(collection)
        docs = [{**doc, "id": doc_id} for doc_id, doc in documents.items()]
        return sort_documents(docs, order_by, descending)

    def query(
        self,
        collection: str,
        field: str,
        value: Any,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        with self._get_lock(collection):
            documents = self._load(collection)
        docs = [{**doc, "id": doc_id} for doc_id, doc in documents.items() if doc.get(field) == value]
        return sort_documents(docs, order_by, descending)

    def insert(self, collection: str, data: dict[str, Any], doc_id: str | None = None) -> str:
        new_id = doc_id or uuid.uuid4().hex
        doc = {k: v for k, v in data.items() if k != "id"}
        with self._get_lock(collection):
            documents = self._load(collection)
            documents[new_id] = doc
            self._save(collection, documents)
        return new_id

    def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> bool:
        with self._get_lock(collection):
            documents = self._load(collection)
            doc = documents.get(doc_id)
            if doc is None:
                return False
            doc.update({k: v for k, v in changes.items() if k != "id"})
            self._save(collection, documents)
            return True

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._get_lock(collection):
            documents = self._load(collection)
            if documents.pop(doc_id, None) is None:
                return False
            self._save(collection, documents)
            return True

    def append_item(
        self,
        collection: str,
        doc_id: str,
        field: str,
        item: dict[str, Any],
        changes: dict[str, Any] | None = None,
    ) -> bool:
        with self._get_lock(collection):
            documents = self._load(collection)
            doc = documents.get(doc_id)
            if doc is None:
                return False
            doc[field] = list(doc.get(field) or []) + [item]
            doc.update(changes or {})
            self._save(collection, documents)
            return True

    def remove_item(
        self,
        collection: str,
        doc_id: str,
        field: str,
        item_id: str,
        changes: dict[str, Any] | None = None,
    ) -> bool:
        with self._get_lock(collection):
            documents = self._load(collection)
            doc = documents.get(doc_id)
            if doc is None:
                return False
            doc[field] = [i for i in doc.get(field) or [] if i.get("id") != item_id]
            doc.update(changes or {})
            self._save(collection, documents)
            return True
