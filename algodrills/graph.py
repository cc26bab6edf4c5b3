"""Adjacency-list graphs and breadth-first traversal."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Sequence


class Graph:
    """A graph stored as an adjacency list, keyed in order of first appearance."""

    def __init__(self) -> None:
        self.adj: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def add_edge(self, u: Hashable, v: Hashable, directed: bool) -> None:
        """Add an edge from u to v, and back from v to u unless ``directed``."""
        self.adj[u].append(v)
        if not directed:
            self.adj[v].append(u)

    def format_edges(self) -> str:
        """Render every node as ``node->n1 , n2 , `` on its own line."""
        return "".join(
            f"{node}->" + "".join(f"{neighbour} , " for neighbour in neighbours) + "\n"
            for node, neighbours in self.adj.items()
        )


def _traverse(
    adjacency: dict[int, list[int]], visited: set[int], start: int
) -> Iterable[int]:
    queue = deque([start])
    visited.add(start)
    while queue:
        node = queue.popleft()
        visited.add(node)
        yield node
        queue.extend(n for n in adjacency.get(node, ()) if n not in visited)


def bfs(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Breadth-first order of an undirected graph over all its components.

    Components are started from vertices 0 .. vertex_count-1 in order. A node
    is marked visited when it is dequeued, so a node reached along several
    paths before being dequeued is reported once per queue entry.
    """
    adjacency: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited: set[int] = set()
    answer: list[int] = []
    for vertex in range(vertex_count):
        if vertex not in visited:
            answer.extend(_traverse(adjacency, visited, vertex))
    return answer


def _read_ints(tokens: Iterable[str]) -> Iterable[int]:
    for token in tokens:
        yield int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a node count, an edge count and the edges from standard input."""
    parser = argparse.ArgumentParser(
        description="Read an undirected graph from standard input."
    )
    parser.add_argument(
        "--adjacency",
        action="store_true",
        help="print the adjacency list instead of the BFS traversal",
    )
    args = parser.parse_args(argv)

    try:
        numbers = _read_ints(sys.stdin.read().split())
        if args.adjacency:
            print("Enter the number of node ")
            next(numbers)
            print("Enter the number of edges")
            edge_count = next(numbers)
            graph = Graph()
            for _ in range(edge_count):
                graph.add_edge(next(numbers), next(numbers), False)
            sys.stdout.write(graph.format_edges())
        else:
            print("Enter the number of nodes : ", end="")
            node_count = next(numbers)
            print("Enter the number of edges : ", end="")
            edge_count = next(numbers)
            edges = [(next(numbers), next(numbers)) for _ in range(edge_count)]
            order = bfs(node_count, edges)
            print("BFS Traversal : " + "".join(f"{node} " for node in order))
    except StopIteration:
        print("error: not enough numbers on input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())