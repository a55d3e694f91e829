import pytest

from percolate.graph import Graph
from percolate.mvc_env import MvcEnv
from percolate.replay_memory import NStepReplayMem, ReplaySample


def _graph():
    return Graph(3, [(0, 1), (1, 2)])


def test_add_tracks_count_and_wraps():
    mem = NStepReplayMem(2, seed=1)
    g = _graph()
    mem.add(g, [0], 1, -1.0, [0, 1], False)
    assert mem.count == 1
    assert mem.current == 1
    mem.add(g, [1], 2, -2.0, [1, 2], True)
    assert mem.count == 2
    assert mem.current == 0
    mem.add(g, [2], 0, -3.0, [], True)
    assert mem.count == 2
    assert mem.current == 1
    assert mem.actions[0] == 0
    assert mem.rewards[0] == -3.0
    assert mem.actions[1] == 2


def test_invalid_memory_size():
    with pytest.raises(ValueError):
        NStepReplayMem(0)


def test_sampling_requires_enough_entries():
    mem = NStepReplayMem(5, seed=0)
    mem.add(_graph(), [], 0, -1.0, [0], True)
    with pytest.raises(ValueError):
        mem.sampling(2)


def test_sampling_is_reproducible_with_seed():
    def draw():
        mem = NStepReplayMem(8, seed=42)
        for a in range(8):
            mem.add(_graph(), [], a, 0.0, [], False)
        return mem.sampling(6).list_at

    first = draw()
    second = draw()
    assert len(first) == 6
    assert all(0 <= a < 8 for a in first)
    assert first == second


def _finished_env():
    env = MvcEnv(1.0)
    env.s0(_graph())
    env.step(0)
    env.step(1)
    env.step(2)
    env.kcore_modify([], 0)
    return env


def test_add_from_env_one_step():
    env = _finished_env()
    mem = NStepReplayMem(10, seed=0)
    mem.add_from_env(env, 1)
    assert mem.count == 3
    assert mem.actions[:3] == [0, 1, 2]
    assert mem.rewards[:3] == [-1.0, -1.0, -1.0]
    assert mem.terminals[:3] == [False, False, True]
    assert env.sum_rewards == [-3.0, -2.0, -1.0]


def test_add_from_env_long_horizon_uses_totals():
    env = _finished_env()
    mem = NStepReplayMem(10, seed=0)
    mem.add_from_env(env, 5)
    assert mem.rewards[:3] == env.sum_rewards
    assert all(mem.terminals[:3])
    assert mem.s_primes[0] == env.action_list


def test_add_from_env_requires_terminal():
    env = MvcEnv(5.0)
    env.s0(_graph())
    env.step(0)
    with pytest.raises(ValueError):
        NStepReplayMem(4).add_from_env(env, 1)


def test_add_from_env_requires_steps():
    env = MvcEnv(0.0)
    env.s0(_graph())
    with pytest.raises(ValueError):
        NStepReplayMem(4).add_from_env(env, 1)