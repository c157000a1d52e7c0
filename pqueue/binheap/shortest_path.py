import logging
import math
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, Optional

from pqueue.binheap.binheap import BinHeap
from pqueue.priority_queue import PriorityQueueFactory

logger = logging.getLogger(__name__)

Graph = Mapping[Hashable, Iterable[tuple[Hashable, float]]]


def dijkstra(
    graph: Graph,
    source: Hashable,
    target: Optional[Hashable] = None,
    factory: PriorityQueueFactory = BinHeap.FACTORY
) -> tuple[dict[Hashable, float], dict[Hashable, Any]]:
    """
    Single-source shortest paths over non-negative edge weights.

    The queue has no decrease-key, so a node is inserted again each time
    a shorter distance to it is found and the stale entries are skipped
    when they reach the front.

    Parameters
    ----------
    graph : Graph
        Adjacency mapping of node -> iterable of (neighbor, weight).
    source : Hashable
        The start node.
    target : Hashable, optional
        If given, the search stops as soon as this node is settled.
    factory : PriorityQueueFactory
        Creates the frontier queue, by default `BinHeap.FACTORY`.

    Returns
    -------
    tuple[dict[Hashable, float], dict[Hashable, Any]]
        Distances of every reached node and the predecessor of each node
        on its shortest path (None for the source).

    Raises
    ------
    ValueError
        If a negative edge weight is encountered.
    """
    dist = {source: 0.0}
    pred = {source: None}
    settled = set()

    queue = factory.create(len(graph))
    queue.insert(source, 0.0)
    while not queue.empty():
        d = queue.peek_min_key()
        node = queue.extract_min()
        if node in settled or d > dist[node]:
            continue
        settled.add(node)
        if node == target:
            break

        for neighbor, weight in graph.get(node, ()):
            if weight < 0:
                raise ValueError(
                    f"Negative edge weight {weight} on {node!r} -> "
                    f"{neighbor!r}"
                )
            candidate = d + weight
            if candidate < dist.get(neighbor, math.inf):
                dist[neighbor] = candidate
                pred[neighbor] = node
                queue.insert(neighbor, candidate)

    logger.debug("Dijkstra from %r settled %d nodes", source, len(settled))
    return dist, pred


def astar(
    graph: Graph,
    source: Hashable,
    target: Hashable,
    heuristic: Callable[[Hashable], float],
    factory: PriorityQueueFactory = BinHeap.FACTORY
) -> tuple[float, list[Hashable]]:
    """
    A* search from `source` to `target`.

    A closed node is reopened when a cheaper route to it turns up, so an
    admissible heuristic need not also be consistent.

    Parameters
    ----------
    graph : Graph
        Adjacency mapping of node -> iterable of (neighbor, weight).
    source : Hashable
        The start node.
    target : Hashable
        The goal node.
    heuristic : Callable[[Hashable], float]
        Admissible estimate of the remaining cost from a node to `target`.
    factory : PriorityQueueFactory
        Creates the frontier queue, by default `BinHeap.FACTORY`.

    Returns
    -------
    tuple[float, list[Hashable]]
        The path cost and the nodes along it, or `(inf, [])` when `target`
        cannot be reached.
    """
    g = {source: 0.0}
    pred = {source: None}
    closed = set()

    queue = factory.create(len(graph))
    queue.insert(source, heuristic(source))
    while not queue.empty():
        node = queue.extract_min()
        if node in closed:
            continue
        if node == target:
            return g[node], reconstruct_path(pred, source, target)
        closed.add(node)

        for neighbor, weight in graph.get(node, ()):
            if weight < 0:
                raise ValueError(
                    f"Negative edge weight {weight} on {node!r} -> "
                    f"{neighbor!r}"
                )
            candidate = g[node] + weight
            if candidate < g.get(neighbor, math.inf):
                g[neighbor] = candidate
                pred[neighbor] = node
                closed.discard(neighbor)
                queue.insert(neighbor, candidate + heuristic(neighbor))

    return math.inf, []


def reconstruct_path(
    predecessors: Mapping[Hashable, Any],
    source: Hashable,
    target: Hashable
) -> list[Hashable]:
    """Walk `predecessors` back from `target`; [] if it was never reached."""
    if target not in predecessors:
        return []
    path = [target]
    while path[-1] != source:
        path.append(predecessors[path[-1]])
    path.reverse()
    return path
