import pytest

from percolate.config import Config


def test_defaults():
    cfg = Config()
    assert cfg.msg_average is False
    assert cfg.embed_dim == 0


def test_load_params_reads_flags():
    cfg = Config().load_params(
        ["prog", "-embed_dim", "64", "-max_n", "50", "-min_n", "30",
         "-mem_size", "1000", "-batch_size", "8", "-msg_average", "1"]
    )
    assert cfg.embed_dim == 64
    assert cfg.max_n == 50
    assert cfg.min_n == 30
    assert cfg.mem_size == 1000
    assert cfg.batch_size == 8
    assert cfg.msg_average is True


def test_n_step_falls_back_to_max_n():
    cfg = Config().load_params(["prog", "-max_n", "40"])
    assert cfg.n_step == cfg.max_n == 40


def test_positive_n_step_kept():
    cfg = Config(n_step=5).load_params(["prog", "-max_n", "40"])
    assert cfg.n_step == 5


def test_lenient_integer_parsing():
    cfg = Config().load_params(["prog", "-embed_dim", "12abc", "-batch_size", "abc"])
    assert cfg.embed_dim == 12
    assert cfg.batch_size == 0


def test_unknown_flags_ignored():
    cfg = Config().load_params(["prog", "-unknown", "7", "-min_n", "3"])
    assert cfg.min_n == 3
    assert cfg.max_n == 0


def test_missing_value_raises():
    with pytest.raises(ValueError):
        Config().load_params(["prog", "-embed_dim"])