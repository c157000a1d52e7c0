from pqueue.binheap.binheap import BinHeap, BinHeapFactory
from pqueue.binheap.shortest_path import astar, dijkstra, reconstruct_path
from pqueue.exceptions import (
    CapacityTooSmallError,
    EmptyQueueError,
    PriorityQueueError,
    UnsupportedOperationError,
)
from pqueue.priority_queue import PriorityQueue, PriorityQueueFactory
