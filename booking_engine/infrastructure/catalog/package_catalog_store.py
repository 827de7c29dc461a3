from __future__ import annotations

import logging

from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.utils.documents import PACKAGES, deserialize_package
from booking_engine.domain.entities.service_package import ServicePackage


class StorePackageCatalog(PackageCatalogPort):
    """Read-only view over the ``packages`` collection owned by the content subsystem."""

    def __init__(self, store: DocumentStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def get_package(self, package_id: str) -> ServicePackage | None:
        if not package_id:
            return None
        doc = self._store.get(PACKAGES, package_id)
        if doc is None:
            self._logger.info("Package not found", extra={"package_id": package_id})
            return None
        return deserialize_package(doc)

    def list_packages(self) -> list[ServicePackage]:
        return [deserialize_package(d) for d in self._store.list_all(PACKAGES, order_by="price")]
