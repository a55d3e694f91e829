# percolate

Building blocks for learning to dismantle networks: an undirected graph
type, a directed batch graph with sparse message-passing matrices for
mini-batches of partially removed graphs, a node-removal episode
environment, and an n-step replay memory for training.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Example

```python
import random

from percolate.graph import Graph
from percolate.mvc_env import MvcEnv
from percolate.prepare_batch_graph import PrepareBatchGraph
from percolate.replay_memory import NStepReplayMem

g = Graph(5, [(0, 1), (1, 2), (2, 3), (3, 4)])

# Lay out the part of the graph not touched by node 2 as a batch.
batch = PrepareBatchGraph()
batch.setup_pred_all([0], [g], [[2]])
print(batch.avail_act_cnt)           # available nodes per graph
print(batch.n2nsum_param.entries())  # (row, col, value) triples
print(batch.aux_feat)

# Play a short episode and store it as n-step transitions.
env = MvcEnv(norm=5.0)
env.s0(g)
rng = random.Random(0)
env.step(env.random_action(rng))
env.kcore_modify([], 0)              # core is empty: the episode ends
memory = NStepReplayMem(100, seed=0)
memory.add_from_env(env, n_step=2)
sample = memory.sampling(1)
print(sample.list_at, sample.list_rt, sample.list_term)
```

## Modules

- `percolate.graph`: `Graph` (edge list plus adjacency lists) and the
  `GraphSet` pool of graphs keyed by integer id, with `insert`, `get`,
  `sample` and `clear`.
- `percolate.graph_struct`: `LinkedTable`, an array of lists that only grows,
  and the directed batch `GraphStruct` with `add_edge`, `add_node` and
  `resize`.
- `percolate.config`: the `Config` dataclass; `load_params` reads
  `-embed_dim`, `-max_n`, `-min_n`, `-mem_size`, `-batch_size` and
  `-msg_average` value pairs from an argument list and sets `n_step` to
  `max_n` when it is not positive.
- `percolate.prepare_batch_graph`: `status_info`, `SparseMatrix`,
  `PrepareBatchGraph` (`setup_graph_input`, `setup_train`, `setup_pred_all`)
  and the `n2n_construct`, `e2n_construct`, `n2e_construct`,
  `e2e_construct`, `subg_construct` builders.
- `percolate.mvc_env`: `MvcEnv`, which records states, actions and rewards
  of one episode; every step gives a reward of `-1 / norm`, and the episode
  ends when `kcore_modify` sets the core size to 0.
- `percolate.replay_memory`: `NStepReplayMem`, a ring buffer of transitions
  with `add`, `add_from_env` and `sampling`, and the `ReplaySample` batch.

## What this package does not do

It holds no neural network and no training loop; it prepares the inputs
and stores the transitions that such a model would use. It also does not
score or refine a removal order: there is no union-find structure, no
largest-component or robustness measure, no betweenness centrality and no
reinsertion heuristic here. There is no command-line program.