"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Beer``).
    """

    @abstractmethod
    def get_by_id(self, id: UUID | str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""
