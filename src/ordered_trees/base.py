from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an absent (None) value."""
    pass


class AbstractSortedCollection(ABC, Generic[T]):
    """
    Abstract base class for a collection that keeps its values in sorted order.
    Duplicate values are allowed.
    """

    @abstractmethod
    def insert(self, value: T) -> None:
        """
        Insert a value into the collection.

        Parameters:
            value (T): The value to be inserted. Must not be None.

        Raises:
            InvalidArgumentError: If value is None.
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check whether a value equal to the given one is stored in the collection.

        Parameters:
            value: A probe comparable with the stored values. Must not be None.

        Returns:
            bool: True if an equal value is stored, False otherwise.

        Raises:
            InvalidArgumentError: If value is None.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored values, duplicates included."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the collection holds no values."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all values from the collection."""
        pass
