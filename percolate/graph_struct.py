"""Directed batch graph with incoming/outgoing edge tables and subgraphs."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class LinkedTable(Generic[T]):
    """An array of lists whose capacity only ever grows."""

    def __init__(self) -> None:
        self.n = 0
        self.head: list[list[T]] = []
        self._ncap = 0

    def _grow(self, needed: int) -> None:
        self._ncap = max(self._ncap * 2, needed)
        self.head.extend([] for _ in range(self._ncap - len(self.head)))

    def add_entry(self, head_id: int, content: T) -> None:
        """Append ``content`` to list ``head_id``, growing the table if needed."""
        if head_id < 0:
            raise IndexError("head_id must not be negative")
        if head_id >= self.n:
            if head_id + 1 > self._ncap:
                self._grow(head_id + 1)
                for lst in self.head[self.n : head_id + 1]:
                    lst.clear()
            self.n = head_id + 1
        self.head[head_id].append(content)

    def resize(self, new_n: int) -> None:
        """Set the logical size to ``new_n`` and empty every list."""
        if new_n > self._ncap:
            self._grow(new_n)
        self.n = new_n
        for lst in self.head:
            lst.clear()


class GraphStruct:
    """A directed graph made of several subgraphs, used for mini-batches."""

    def __init__(self) -> None:
        self.out_edges: LinkedTable[tuple[int, int]] = LinkedTable()
        self.in_edges: LinkedTable[tuple[int, int]] = LinkedTable()
        self.subgraph: LinkedTable[int] = LinkedTable()
        self.edge_list: list[tuple[int, int]] = []
        self.num_nodes = 0
        self.num_edges = 0
        self.num_subgraph = 0

    def add_edge(self, idx: int, x: int, y: int) -> None:
        """Add edge ``x -> y``; indices must be added in order starting at 0."""
        if idx != self.num_edges:
            raise ValueError(f"edge index {idx} out of order, expected {self.num_edges}")
        self.out_edges.add_entry(x, (idx, y))
        self.in_edges.add_entry(y, (idx, x))
        self.num_edges += 1
        self.edge_list.append((x, y))

    def add_node(self, subg_id: int, n_idx: int) -> None:
        self.subgraph.add_entry(subg_id, n_idx)

    def resize(self, num_subgraph: int, num_nodes: int = 0) -> None:
        """Reset to an empty graph with the given subgraph and node counts."""
        self.num_nodes = num_nodes
        self.num_edges = 0
        self.edge_list.clear()
        self.num_subgraph = num_subgraph
        self.in_edges.resize(num_nodes)
        self.out_edges.resize(num_nodes)
        self.subgraph.resize(num_subgraph)