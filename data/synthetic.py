from __future__ import annotations

from typing import List

import torch

from tensor.random import uniform_stream
from .iris import FisherRecord


def random_vector_set(seed: int, n: int = 150, d: int = 4, dtype: torch.dtype = torch.float64) -> torch.Tensor:
    """(n, d) tensor of independent U[0,1) components, reproducible per seed."""
    if n <= 0 or d <= 0:
        raise ValueError(f"n and d must be positive, got n={n} d={d}")
    return uniform_stream((n, d), seed=seed, dtype=dtype)


def random_records(seed: int, n: int = 150, d: int = 4) -> List[FisherRecord]:
    """Synthetic records labelled by their index, mirroring the iris record layout."""
    v = random_vector_set(seed, n=n, d=d)
    return [FisherRecord(measures=row.tolist(), label=str(i), index=i) for i, row in enumerate(v)]
