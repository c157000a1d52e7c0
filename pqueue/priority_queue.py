from abc import ABC, abstractmethod
from typing import Any


class PriorityQueue(ABC):
    """
    Min-priority queue of (element, priority) pairs.

    Priorities are real numbers and the element with the smallest priority
    is served first. Implementations are free to reject
    `insert_or_dec_key` when they keep no element index.
    """

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def empty(self) -> bool:
        ...

    @abstractmethod
    def insert(self, e: Any, p: float) -> None:
        ...

    @abstractmethod
    def insert_or_dec_key(self, e: Any, p: float) -> None:
        """
        Insert `e` with priority `p`, or lower its priority to `p` when `e`
        is already queued with a higher one.
        """

    @abstractmethod
    def extract_min(self) -> Any:
        ...

    @abstractmethod
    def peek_min(self) -> Any:
        ...

    @abstractmethod
    def peek_min_key(self) -> float:
        ...


class PriorityQueueFactory(ABC):
    """Creates fresh, empty priority queues."""

    @abstractmethod
    def create(self, max_size: int) -> PriorityQueue:
        """
        Create an empty queue.

        Parameters
        ----------
        max_size : int
            Hint for the number of entries the queue will hold.

        Returns
        -------
        PriorityQueue
            A new, empty queue.
        """
