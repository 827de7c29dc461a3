from dataclasses import dataclass


@dataclass(frozen=True)
class ServicePackage:
    id: str
    name: str
    price: int
