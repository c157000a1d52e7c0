import logging

from pqueue import BinHeap, dijkstra, reconstruct_path

logging.basicConfig(level=logging.DEBUG)

priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
elements = ["low", "very_low", "medium", "low_med", "high", "lowest"]

# Create a binary heap through the shared factory
print("Creating binary heap...")
heap = BinHeap.FACTORY.create(len(elements))
for e, p in zip(elements, priorities):
    heap.insert(e, p)

# Test basic properties
print(f"Heap size: {heap.size()}")
print(f"Is empty: {heap.empty()}")
print(f"Capacity: {heap.capacity}")
print(f"Minimum: {heap.peek_min()} ({heap.peek_min_key()})")

heap.rekey(elements[4], 0.5)
print(f"Minimum after rekey: {heap.peek_min()} ({heap.peek_min_key()})")

order = []
while not heap.empty():
    order.append(heap.extract_min())
print(f"Extraction order: {order}")

graph = {
    "A": [("B", 4.0), ("C", 1.0)],
    "B": [("D", 1.0)],
    "C": [("B", 2.0), ("D", 5.0)],
    "D": [],
}
dist, pred = dijkstra(graph, "A")
print(f"Distances from A: {dist}")
print(f"Path A -> D: {reconstruct_path(pred, 'A', 'D')}")
