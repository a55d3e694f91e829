"""Undirected graphs and keyed pools of graphs."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator


class Graph:
    """An undirected graph kept as an edge list plus adjacency lists."""

    def __init__(self, num_nodes: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        if num_nodes < 0:
            raise ValueError("num_nodes must not be negative")
        self.num_nodes = num_nodes
        self.adj_list: list[list[int]] = [[] for _ in range(num_nodes)]
        self.edge_list: list[tuple[int, int]] = []
        for x, y in edges:
            for node in (x, y):
                if not 0 <= node < num_nodes:
                    raise ValueError(f"node {node} outside 0..{num_nodes - 1}")
            self.adj_list[x].append(y)
            self.adj_list[y].append(x)
            self.edge_list.append((x, y))

    @property
    def num_edges(self) -> int:
        return len(self.edge_list)

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"


class GraphSet:
    """A pool of graphs keyed by integer id."""

    def __init__(self) -> None:
        self.graph_pool: dict[int, Graph] = {}

    def insert(self, gid: int, graph: Graph) -> None:
        """Add a graph under a new id; an id already in use is an error."""
        if gid in self.graph_pool:
            raise KeyError(f"graph id {gid} already present")
        self.graph_pool[gid] = graph

    def get(self, gid: int) -> Graph:
        """Return the graph stored under ``gid``."""
        try:
            return self.graph_pool[gid]
        except KeyError:
            raise KeyError(f"no graph with id {gid}") from None

    def sample(self, rng: random.Random | None = None) -> Graph:
        """Pick an id uniformly from ``0..len-1`` and return its graph."""
        if not self.graph_pool:
            raise LookupError("graph pool is empty")
        rng = rng or random.Random()
        gid = rng.randrange(len(self.graph_pool))
        return self.get(gid)

    def clear(self) -> None:
        self.graph_pool.clear()

    def __len__(self) -> int:
        return len(self.graph_pool)

    def __contains__(self, gid: object) -> bool:
        return gid in self.graph_pool

    def __iter__(self) -> Iterator[int]:
        return iter(self.graph_pool)