"""Sparse message-passing matrices for a mini-batch of partially covered graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from percolate.graph import Graph
from percolate.graph_struct import GraphStruct


@dataclass
class SparseMatrix:
    """A matrix in coordinate form: parallel row, column and value lists."""

    row_num: int = 0
    col_num: int = 0
    row_index: list[int] = field(default_factory=list)
    col_index: list[int] = field(default_factory=list)
    value: list[float] = field(default_factory=list)

    def append(self, row: int, col: int, value: float = 1.0) -> None:
        self.row_index.append(row)
        self.col_index.append(col)
        self.value.append(value)

    def __len__(self) -> int:
        return len(self.value)

    def entries(self) -> list[tuple[int, int, float]]:
        """All stored entries as ``(row, col, value)`` triples."""
        return list(zip(self.row_index, self.col_index, self.value))


def status_info(graph: Graph, covered: Iterable[int]) -> tuple[int, int, list[int]]:
    """Inspect which parts of ``graph`` are still live given ``covered`` nodes.

    Returns ``(available, covered_edges, idx_map)``: the number of nodes that
    touch at least one uncovered edge, the number of edges with a covered end,
    and a map holding 0 for each such available node and -1 for the rest.
    """
    covered_set = set(covered)
    idx_map = [-1] * graph.num_nodes
    covered_edges = 0
    available = 0
    for x, y in graph.edge_list:
        if x in covered_set or y in covered_set:
            covered_edges += 1
            continue
        for node in (x, y):
            if idx_map[node] < 0:
                available += 1
                idx_map[node] = 0
    return available, covered_edges, idx_map


class PrepareBatchGraph:
    """Builds the batch graph and its sparse operators from several graphs."""

    def __init__(self) -> None:
        self.act_select = SparseMatrix()
        self.rep_global = SparseMatrix()
        self.n2nsum_param = SparseMatrix()
        self.subgsum_param = SparseMatrix()
        self.idx_map_list: list[list[int]] = []
        self.aux_feat: list[list[float]] = []
        self.graph = GraphStruct()
        self.avail_act_cnt: list[int] = []

    def setup_graph_input(
        self,
        idxes: Sequence[int],
        g_list: Sequence[Graph],
        covered: Sequence[Sequence[int]],
        actions: Sequence[int] | None,
    ) -> None:
        """Lay out the uncovered part of each selected graph as one batch.

        ``idxes`` picks graphs from ``g_list``; ``covered`` and ``actions`` are
        indexed the same way as ``g_list``. With ``actions`` the action
        selection matrix is built, otherwise the node-to-graph one.
        """
        self.act_select = SparseMatrix()
        self.rep_global = SparseMatrix()
        self.idx_map_list = []
        self.avail_act_cnt = []
        self.aux_feat = []

        node_cnt = 0
        for gi in idxes:
            g = g_list[gi]
            cov = covered[gi]
            available, covered_edges, idx_map = status_info(g, cov)
            feat: list[float] = []
            if g.num_nodes:
                feat.append(len(cov) / g.num_nodes)
            if g.edge_list:
                feat.append(covered_edges / len(g.edge_list))
            feat.append(1.0)
            self.aux_feat.append(feat)
            self.idx_map_list.append(idx_map)
            self.avail_act_cnt.append(available)
            node_cnt += available

        self.graph.resize(len(idxes), node_cnt)
        if actions is not None:
            self.act_select.row_num = len(idxes)
            self.act_select.col_num = node_cnt
        else:
            self.rep_global.row_num = node_cnt
            self.rep_global.col_num = len(idxes)

        node_cnt = 0
        edge_cnt = 0
        for i, gi in enumerate(idxes):
            g = g_list[gi]
            local = {}
            for node, status in enumerate(self.idx_map_list[i]):
                if status < 0:
                    continue
                pos = node_cnt + len(local)
                local[node] = pos
                self.graph.add_node(i, pos)
                if actions is None:
                    self.rep_global.append(pos, i)

            if actions is not None:
                act = actions[gi]
                if not 0 <= act < g.num_nodes or act not in local:
                    raise ValueError(f"action {act} is not an available node of graph {gi}")
                self.act_select.append(i, local[act])

            for x, y in g.edge_list:
                if x not in local or y not in local:
                    continue
                self.graph.add_edge(edge_cnt, local[x], local[y])
                edge_cnt += 1
                self.graph.add_edge(edge_cnt, local[y], local[x])
                edge_cnt += 1
            node_cnt += self.avail_act_cnt[i]

        self.n2nsum_param = n2n_construct(self.graph)
        self.subgsum_param = subg_construct(self.graph)

    def setup_train(self, idxes, g_list, covered, actions) -> None:
        """Prepare a training batch, with the chosen action of each graph."""
        self.setup_graph_input(idxes, g_list, covered, actions)

    def setup_pred_all(self, idxes, g_list, covered) -> None:
        """Prepare a batch for scoring every available node."""
        self.setup_graph_input(idxes, g_list, covered, None)


def n2n_construct(graph: GraphStruct) -> SparseMatrix:
    """Node-to-node sum: row ``i`` collects the sources of edges into ``i``."""
    result = SparseMatrix(graph.num_nodes, graph.num_nodes)
    for i in range(graph.num_nodes):
        for _, src in graph.in_edges.head[i]:
            result.append(i, src)
    return result


def e2n_construct(graph: GraphStruct) -> SparseMatrix:
    """Edge-to-node sum: row ``i`` collects the edges entering ``i``."""
    result = SparseMatrix(graph.num_nodes, graph.num_edges)
    for i in range(graph.num_nodes):
        for edge_idx, _ in graph.in_edges.head[i]:
            result.append(i, edge_idx)
    return result


def n2e_construct(graph: GraphStruct) -> SparseMatrix:
    """Node-to-edge: each edge takes its source node."""
    result = SparseMatrix(graph.num_edges, graph.num_nodes)
    for i, (src, _) in enumerate(graph.edge_list):
        result.append(i, src)
    return result


def e2e_construct(graph: GraphStruct) -> SparseMatrix:
    """Edge-to-edge: edge ``x->y`` collects edges into ``x`` except ``y->x``."""
    result = SparseMatrix(graph.num_edges, graph.num_edges)
    for i, (node_from, node_to) in enumerate(graph.edge_list):
        for edge_idx, src in graph.in_edges.head[node_from]:
            if src == node_to:
                continue
            result.append(i, edge_idx)
    return result


def subg_construct(graph: GraphStruct) -> SparseMatrix:
    """Subgraph sum: row ``i`` collects the nodes of subgraph ``i``."""
    result = SparseMatrix(graph.num_subgraph, graph.num_nodes)
    for i in range(graph.num_subgraph):
        for node in graph.subgraph.head[i]:
            result.append(i, node)
    return result