import math

import pytest

from pqueue.binheap.binheap import BinHeap
from pqueue.binheap.shortest_path import astar, dijkstra, reconstruct_path
from pqueue.priority_queue import PriorityQueueFactory


class CountingFactory(PriorityQueueFactory):
    def __init__(self):
        self.created = []

    def create(self, max_size):
        heap = BinHeap(max_size)
        self.created.append(heap)
        return heap


class TestShortestPath:

    @pytest.fixture
    def graph(self):
        return {
            "A": [("B", 4.0), ("C", 1.0)],
            "B": [("D", 1.0)],
            "C": [("B", 2.0), ("D", 5.0)],
            "D": [("E", 3.0)],
            "E": [],
            "F": [("A", 1.0)],
        }

    @pytest.fixture
    def grid(self):
        """5x5 unit grid with a wall in column 2, open at row 4"""
        walls = {(2, 0), (2, 1), (2, 2), (2, 3)}
        graph = {}
        for x in range(5):
            for y in range(5):
                if (x, y) in walls:
                    continue
                graph[(x, y)] = [
                    ((x + dx, y + dy), 1.0)
                    for dx, dy in [(1, 0), (-1, 0), (0, 1), (0, -1)]
                    if 0 <= x + dx < 5 and 0 <= y + dy < 5
                    and (x + dx, y + dy) not in walls
                ]
        return graph

    def test_dijkstra_distances(self, graph):
        """Test distances and paths from a single source"""
        dist, pred = dijkstra(graph, "A")
        assert dist == {"A": 0.0, "C": 1.0, "B": 3.0, "D": 4.0, "E": 7.0}
        assert "F" not in dist
        assert pred["A"] is None
        assert reconstruct_path(pred, "A", "E") == ["A", "C", "B", "D", "E"]

    def test_dijkstra_early_exit(self, graph):
        """Test stopping once the target is settled"""
        dist, pred = dijkstra(graph, "A", target="B")
        assert dist["B"] == 3.0
        assert reconstruct_path(pred, "A", "B") == ["A", "C", "B"]

    def test_dijkstra_uses_factory(self, graph):
        """Test that the frontier comes from the given factory"""
        factory = CountingFactory()
        dijkstra(graph, "A", factory=factory)
        assert len(factory.created) == 1
        assert factory.created[0].empty()

    def test_dijkstra_negative_weight(self):
        """Test rejection of negative edge weights"""
        with pytest.raises(ValueError):
            dijkstra({"A": [("B", -1.0)], "B": []}, "A")

    def test_reconstruct_unreached(self, graph):
        """Test path reconstruction for unreached nodes"""
        _, pred = dijkstra(graph, "A")
        assert reconstruct_path(pred, "A", "F") == []
        assert reconstruct_path(pred, "A", "A") == ["A"]

    def test_astar_grid(self, grid):
        """Test A* against Dijkstra on a walled grid"""
        def manhattan(node):
            return abs(node[0] - 4) + abs(node[1] - 0)

        cost, path = astar(grid, (0, 0), (4, 0), manhattan)
        dist, _ = dijkstra(grid, (0, 0))
        assert cost == dist[(4, 0)] == 12.0
        assert path[0] == (0, 0)
        assert path[-1] == (4, 0)
        assert len(path) == 13
        assert (2, 4) in path

    def test_astar_reopens_closed_nodes(self):
        """Test A* with an admissible but inconsistent heuristic"""
        graph = {
            "S": [("X", 5.0), ("A", 1.0)],
            "A": [("X", 1.0)],
            "X": [("T", 10.0)],
            "T": [],
        }
        estimates = {"A": 10.0}

        cost, path = astar(graph, "S", "T", lambda n: estimates.get(n, 0.0))
        assert path == ["S", "A", "X", "T"]
        assert cost == 12.0

    def test_astar_unreachable(self, graph):
        """Test A* when the target cannot be reached"""
        cost, path = astar(graph, "A", "F", lambda node: 0.0)
        assert cost == math.inf
        assert path == []
