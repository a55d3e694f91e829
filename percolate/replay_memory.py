"""Fixed-size ring buffer of n-step transitions for replay training."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from percolate.graph import Graph
from percolate.mvc_env import MvcEnv


@dataclass
class ReplaySample:
    """A batch of transitions drawn from the replay memory."""

    g_list: list[Graph] = field(default_factory=list)
    list_st: list[list[int]] = field(default_factory=list)
    list_s_primes: list[list[int]] = field(default_factory=list)
    list_at: list[int] = field(default_factory=list)
    list_rt: list[float] = field(default_factory=list)
    list_term: list[bool] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.list_at)


class NStepReplayMem:
    """Ring buffer holding transitions; the oldest entry is overwritten first."""

    def __init__(self, memory_size: int, seed: int | None = None) -> None:
        if memory_size <= 0:
            raise ValueError("memory_size must be positive")
        self.memory_size = memory_size
        self.graphs: list[Graph | None] = [None] * memory_size
        self.actions: list[int] = [0] * memory_size
        self.rewards: list[float] = [0.0] * memory_size
        self.states: list[list[int]] = [[] for _ in range(memory_size)]
        self.s_primes: list[list[int]] = [[] for _ in range(memory_size)]
        self.terminals: list[bool] = [False] * memory_size
        self.current = 0
        self.count = 0
        self._rng = random.Random(seed)

    def __len__(self) -> int:
        return self.count

    def add(
        self,
        g: Graph,
        s_t: Sequence[int],
        a_t: int,
        r_t: float,
        s_prime: Sequence[int],
        terminal: bool,
    ) -> None:
        """Store one transition at the current slot and advance."""
        slot = self.current
        self.graphs[slot] = g
        self.actions[slot] = a_t
        self.rewards[slot] = r_t
        self.states[slot] = list(s_t)
        self.s_primes[slot] = list(s_prime)
        self.terminals[slot] = terminal
        self.count = max(self.count, slot + 1)
        self.current = (slot + 1) % self.memory_size

    def add_from_env(self, env: MvcEnv, n_step: int) -> None:
        """Store every step of a finished episode as an n-step transition."""
        if not env.is_terminal():
            raise ValueError("episode has not reached a terminal state")
        num_steps = len(env.state_seq)
        if num_steps == 0:
            raise ValueError("episode has no steps")
        if env.graph is None:
            raise ValueError("environment has no graph")

        env.sum_rewards[num_steps - 1] = env.reward_seq[num_steps - 1]
        for i in reversed(range(num_steps - 1)):
            env.sum_rewards[i] = env.sum_rewards[i + 1] + env.reward_seq[i]

        for i, (state, action) in enumerate(zip(env.state_seq, env.act_seq)):
            if i + n_step >= num_steps:
                cur_r = env.sum_rewards[i]
                s_prime = env.action_list
                term_t = True
            else:
                cur_r = env.sum_rewards[i] - env.sum_rewards[i + n_step]
                s_prime = env.state_seq[i + n_step]
                term_t = False
            self.add(env.graph, state, action, cur_r, s_prime, term_t)

    def sampling(self, batch_size: int) -> ReplaySample:
        """Draw ``batch_size`` transitions uniformly, with replacement."""
        if self.count < batch_size:
            raise ValueError(
                f"cannot sample {batch_size} transitions from {self.count} stored"
            )
        result = ReplaySample()
        for _ in range(batch_size):
            idx = self._rng.randint(0, self.memory_size - 1) % self.count
            result.g_list.append(self.graphs[idx])
            result.list_st.append(list(self.states[idx]))
            result.list_at.append(self.actions[idx])
            result.list_rt.append(self.rewards[idx])
            result.list_s_primes.append(list(self.s_primes[idx]))
            result.list_term.append(self.terminals[idx])
        return result