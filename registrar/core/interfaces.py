"""
Core interfaces and abstract base classes for the Registrar application.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TypeVar, Generic


T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """Abstract base class for repositories."""

    @abstractmethod
    def add(self, item: T) -> None:
        """Add an item."""
        pass

    @abstractmethod
    def remove(self, item: T) -> None:
        """Remove the first item equal to the given one."""
        pass

    @abstractmethod
    def update(self, item: T) -> None:
        """Replace the stored item that shares the given item's ID."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Find item by ID."""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get all items in insertion order."""
        pass

    @abstractmethod
    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        """Find all items matching a predicate."""
        pass
