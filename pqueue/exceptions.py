class PriorityQueueError(Exception):
    """Base class for errors raised by the priority queues."""


class EmptyQueueError(PriorityQueueError, RuntimeError):
    """Raised when the minimum key of an empty queue is requested."""


class CapacityTooSmallError(PriorityQueueError, ValueError):
    """Raised when a queue is resized below its current number of entries."""


class UnsupportedOperationError(PriorityQueueError, NotImplementedError):
    """Raised by queues that do not implement an optional operation."""
