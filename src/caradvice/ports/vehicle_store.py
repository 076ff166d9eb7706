from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from caradvice.domain.vehicle import Vehicle


class VehicleStore(ABC):
    """
    Port for read-only catalog data access.

    The store is built once at startup and never mutated afterwards, so
    implementations can be shared across requests without locking.

    Contract:
        - all() returns vehicles in store order (the order sorts fall back to)
        - get_by_slug() signals absence with None, never by raising
    """

    @abstractmethod
    def all(self) -> Sequence[Vehicle]:
        """Every vehicle, in store order."""
        ...

    @abstractmethod
    def get_by_slug(self, slug: str) -> Vehicle | None:
        """
        Look up a single vehicle.

        Args:
            slug: URL slug (exact match)

        Returns:
            Vehicle if found, None otherwise
        """
        ...

    def __len__(self) -> int:
        return len(self.all())
