"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend, and ``WriteResult``,
the outcome of a version-checked write.  Service-layer code depends
on these abstractions, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class WriteResult(Generic[T]):
    """Outcome of a compare-and-swap write.

    ``applied`` is ``False`` when the stored ``version`` no longer matched
    ``expected_version``; the row was left untouched in that case.
    """

    entity: T
    applied: bool
    expected_version: int

    @property
    def conflict(self) -> bool:
        return not self.applied


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``Beer``).
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every entity in natural (insertion) order."""

    @abstractmethod
    def save(self, entity: T) -> WriteResult[T]:
        """Insert a new entity or version-checked update of an existing one."""
