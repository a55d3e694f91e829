"""Environment for removing nodes one step at a time from a graph."""

from __future__ import annotations

import random
from collections.abc import Iterable

from percolate.graph import Graph


class MvcEnv:
    """Tracks actions, states and rewards of one node-removal episode."""

    def __init__(self, norm: float) -> None:
        self.norm = norm
        self.kcore_nodes_num = int(norm)
        self.graph: Graph | None = None
        self.num_covered_edges = 0
        self.state_seq: list[list[int]] = []
        self.act_seq: list[int] = []
        self.action_list: list[int] = []
        self.reward_seq: list[float] = []
        self.sum_rewards: list[float] = []
        self.covered_set: set[int] = set()
        self.avail_list: list[int] = []

    def s0(self, graph: Graph) -> None:
        """Start a new episode on ``graph``."""
        self.graph = graph
        self.covered_set.clear()
        self.action_list.clear()
        self.state_seq.clear()
        self.act_seq.clear()
        self.reward_seq.clear()
        self.sum_rewards.clear()

    def kcore_modify(self, nodes_out_of_kcore: Iterable[int], kcore_nodes_num: int) -> None:
        """Mark nodes outside the k-core as removed and record the core size."""
        for node in nodes_out_of_kcore:
            self.covered_set.add(node)
            self.action_list.append(node)
        self.kcore_nodes_num = kcore_nodes_num

    def step(self, a: int) -> float:
        """Record action ``a`` in the current state and return its reward."""
        if self.graph is None:
            raise RuntimeError("no graph; call s0 first")
        if a in self.covered_set:
            raise ValueError(f"node {a} is already covered")
        self.state_seq.append(list(self.action_list))
        self.act_seq.append(a)
        r_t = self.reward()
        self.reward_seq.append(r_t)
        self.sum_rewards.append(r_t)
        return r_t

    def random_action(self, rng: random.Random | None = None) -> int:
        """Pick an uncovered node that still has an uncovered neighbour."""
        if self.graph is None:
            raise RuntimeError("no graph; call s0 first")
        covered = self.covered_set
        self.avail_list = [
            node
            for node in range(self.graph.num_nodes)
            if node not in covered
            and any(neigh not in covered for neigh in self.graph.adj_list[node])
        ]
        if not self.avail_list:
            raise LookupError("no useful action left")
        rng = rng or random.Random()
        return self.avail_list[rng.randrange(len(self.avail_list))]

    def is_terminal(self) -> bool:
        return self.kcore_nodes_num == 0

    def reward(self) -> float:
        return -1.0 / self.norm