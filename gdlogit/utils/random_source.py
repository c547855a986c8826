# gdlogit/utils/random_source.py
from __future__ import annotations

from typing import Optional

import numpy as np


class RandomSource:
    """
    RandomSource

    Single place where training draws randomness:
    - uniform(low, high, size) for parameter initialization
    - shuffle(indices) for the per-epoch sample order

    Pass a seed (or a prepared ``np.random.Generator``) to make a training
    run reproducible. Without one, numpy seeds from OS entropy once, and
    every epoch continues the same stream.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        *,
        generator: Optional[np.random.Generator] = None,
    ):
        self.seed = seed
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    def uniform(self, low: float, high: float, size: int) -> np.ndarray:
        if low > high:
            raise ValueError(f"[RandomSource] low={low} > high={high}")
        return self._rng.uniform(low, high, size).astype(np.float32)

    def shuffle(self, indices: np.ndarray) -> None:
        """Shuffle ``indices`` in place."""
        self._rng.shuffle(indices)
