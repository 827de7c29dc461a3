from __future__ import annotations

from abc import ABC, abstractmethod

from booking_engine.domain.entities.service_package import ServicePackage


class PackageCatalogPort(ABC):
    @abstractmethod
    def get_package(self, package_id: str) -> ServicePackage | None:
        """Resolve a package id to its name and live price."""
        raise NotImplementedError

    @abstractmethod
    def list_packages(self) -> list[ServicePackage]:
        raise NotImplementedError
