"""Run-time hyper-parameters read from command-line style flags."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


_INT_FLAGS = {
    "-embed_dim": "embed_dim",
    "-max_n": "max_n",
    "-min_n": "min_n",
    "-mem_size": "mem_size",
    "-batch_size": "batch_size",
}


@dataclass
class Config:
    embed_dim: int = 0
    batch_size: int = 0
    max_n: int = 0
    min_n: int = 0
    mem_size: int = 0
    node_dim: int = 0
    aux_dim: int = 0
    n_step: int = 0
    msg_average: bool = False

    def load_params(self, argv: Sequence[str]) -> Config:
        """Read ``-flag value`` pairs from ``argv`` (``argv[0]`` is skipped)."""
        for i in range(1, len(argv), 2):
            flag = argv[i]
            if flag not in _INT_FLAGS and flag != "-msg_average":
                continue
            if i + 1 >= len(argv):
                raise ValueError(f"missing value for {flag}")
            value = _atoi(argv[i + 1])
            if flag == "-msg_average":
                self.msg_average = bool(value)
            else:
                setattr(self, _INT_FLAGS[flag], value)
        if self.n_step <= 0:
            self.n_step = self.max_n
        return self