from collections import deque

from vecbool import PackedBoolVector

# a small undirected graph as an adjacency list
EDGES = {
    0: [1, 2],
    1: [0, 3],
    2: [0, 3, 4],
    3: [1, 2],
    4: [2],
    5: [6],
    6: [5],
}


def reachable_from(start: int, node_count: int) -> PackedBoolVector:
    visited = PackedBoolVector.zeroed(node_count)
    visited.set(start, True)
    queue = deque([start])

    while queue:
        node = queue.popleft()
        for neighbour in EDGES.get(node, []):
            if not visited.get_unchecked(neighbour):
                visited.set_unchecked(neighbour, True)
                queue.append(neighbour)

    return visited


def main():
    visited = reachable_from(0, len(EDGES))
    print("Visited:", visited)
    print("Reachable nodes:", [idx for idx, seen in enumerate(visited) if seen])


if __name__ == "__main__":
    main()
