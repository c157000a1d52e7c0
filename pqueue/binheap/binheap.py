import logging
from typing import Any

import numpy as np

from pqueue.exceptions import (
    CapacityTooSmallError,
    EmptyQueueError,
    UnsupportedOperationError,
)
from pqueue.priority_queue import PriorityQueue, PriorityQueueFactory

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1000
MIN_CAPACITY = 10
GROW_FACTOR = 2.0


class BinHeap(PriorityQueue):
    """
    Binary min-heap of (element, priority) pairs.

    Entries live in two parallel 1-based arrays: a float64 ndarray of
    priorities and a list of elements. Slot 0 holds a negative infinity
    sentinel so that sifting up stops at the root without a bounds check.
    Storage doubles when an insert overflows the capacity and never
    shrinks.

    Elements are located by identity (`is`) in `rekey`, so a payload that
    is queued more than once is only ever updated at its first slot.

    Parameters
    ----------
    capacity : int
        Initial number of entries the heap can hold without growing, by
        default 1000. Values below 10 are raised to 10.
    """

    FACTORY = None

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < MIN_CAPACITY:
            capacity = MIN_CAPACITY
        self._capacity = capacity
        self._size = 0
        self._prio = np.zeros(capacity + 1, dtype=np.float64)
        self._elem = [None] * (capacity + 1)
        self._prio[0] = -np.inf

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"BinHeap(size={self._size}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size <= 0

    def peek_min(self) -> Any:
        """Return the element with the smallest priority, or None if empty."""
        if self._size > 0:
            return self._elem[1]
        return None

    def peek_min_key(self) -> float:
        """
        Return the smallest priority in the heap.

        Raises
        ------
        EmptyQueueError
            If the heap is empty; a priority has no "absent" value.
        """
        if self._size > 0:
            return float(self._prio[1])
        raise EmptyQueueError("An empty queue does not have a minimum key.")

    def insert_or_dec_key(self, e: Any, p: float) -> None:
        raise UnsupportedOperationError(
            "BinHeap has no decrease key operation."
        )

    def insert(self, e: Any, p: float) -> None:
        """
        Add `e` with priority `p`.

        Parameters
        ----------
        e : Any
            The payload. It is stored by reference.
        p : float
            The priority. Must not be NaN or negative infinity.
        """
        p = float(p)
        if self._size + 1 > self._capacity:
            self.resize(
                max(int(self._capacity * GROW_FACTOR), self._size + 1)
            )
        self._size += 1
        i = self._sift_up(self._size, p)
        self._elem[i] = e
        self._prio[i] = p

    def extract_min(self) -> Any:
        """
        Remove and return the element with the smallest priority.

        Returns
        -------
        Any
            The removed element, or None if the heap is empty.
        """
        if self._size <= 0:
            return None
        last = self._size
        min_elem = self._elem[1]
        last_elem = self._elem[last]
        last_prio = self._prio[last]
        self._size -= 1

        i = self._sift_down(1, last_prio)
        self._elem[i] = last_elem
        self._prio[i] = last_prio
        # the vacated slot is past size now (or is slot 1 of an empty heap)
        self._elem[last] = None
        return min_elem

    def rekey(self, e: Any, p: float) -> None:
        """
        Change the priority of the queued element `e` to `p`.

        The element is found by identity with a linear scan of the live
        entries, so this costs O(n) plus the O(log n) re-heapify. If `e` is
        not queued, the heap is left untouched.

        Parameters
        ----------
        e : Any
            An element previously passed to `insert`.
        p : float
            Its new priority.
        """
        p = float(p)
        elem = self._elem
        for i in range(1, self._size + 1):
            if elem[i] is e:
                break
        else:
            return

        if p > self._prio[i]:
            i = self._sift_down(i, p)
        else:
            i = self._sift_up(i, p)
        elem[i] = e
        self._prio[i] = p

    def reset(self) -> None:
        """Empty the heap in one step, keeping its storage."""
        self._size = 0

    def resize(self, capacity: int) -> None:
        """
        Reallocate storage for `capacity` entries.

        Parameters
        ----------
        capacity : int
            The new capacity.

        Raises
        ------
        CapacityTooSmallError
            If the heap holds more than `capacity` entries.
        """
        if capacity < self._size:
            raise CapacityTooSmallError(
                "BinHeap contains too many elements to fit in new capacity."
            )
        logger.debug(
            "Resizing BinHeap from %d to %d", self._capacity, capacity
        )
        keep = self._size + 1
        prio = np.zeros(capacity + 1, dtype=np.float64)
        prio[:keep] = self._prio[:keep]
        self._prio = prio
        self._elem = self._elem[:keep] + [None] * (capacity + 1 - keep)
        self._capacity = capacity

    def dump(self) -> list[str]:
        """
        Log every storage slot at DEBUG level, live or not.

        Returns
        -------
        list[str]
            The logged lines, one per slot plus a closing separator.
        """
        lines = []
        for i in range(self._capacity + 1):
            marker = "(UNUSED)" if i > self._size else ""
            lines.append(
                f"{i}\t{self._prio[i]:f}\t{self._elem[i]}\t{marker}"
            )
        lines.append("-----------------------")
        for line in lines:
            logger.debug(line)
        return lines

    def _sift_up(self, i: int, p: float) -> int:
        # prio[0] is -inf, so the loop always stops at the root
        prio = self._prio
        elem = self._elem
        while prio[i // 2] > p:
            elem[i] = elem[i // 2]
            prio[i] = prio[i // 2]
            i //= 2
        return i

    def _sift_down(self, i: int, p: float) -> int:
        prio = self._prio
        elem = self._elem
        size = self._size
        while i * 2 <= size:
            child = i * 2
            if child != size and prio[child + 1] < prio[child]:
                child += 1
            if p > prio[child]:
                elem[i] = elem[child]
                prio[i] = prio[child]
                i = child
            else:
                break
        return i

    def _validate(self) -> bool:
        """Check the sentinel, the storage bounds and the heap property."""
        if self._prio[0] != -np.inf:
            return False
        if not 0 <= self._size <= self._capacity:
            return False
        if len(self._prio) != self._capacity + 1:
            return False
        if len(self._elem) != self._capacity + 1:
            return False
        live = self._prio[1:self._size + 1]
        for i in range(2, self._size + 1):
            if live[i // 2 - 1] > live[i - 1]:
                return False
        return True


class BinHeapFactory(PriorityQueueFactory):
    """Creates `BinHeap` instances sized to the caller's hint."""

    def create(self, max_size: int) -> BinHeap:
        return BinHeap(max_size)


BinHeap.FACTORY = BinHeapFactory()
