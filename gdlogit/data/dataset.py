# gdlogit/data/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from gdlogit.utils.errors import InvalidInputError


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Dataset（FROZEN）

    Semantics:
    - samples: (m, feature_length) float32, one row per sample
    - labels:  (m,) float32, parallel to samples
    - both arrays are copied and flagged read-only on construction

    Sample/label count agreement and the minimum sample count are
    training preconditions, checked by the trainer, not here.
    """

    samples: np.ndarray
    labels: np.ndarray

    def __post_init__(self):
        samples = np.array(self.samples, dtype=np.float32)
        labels = np.array(self.labels, dtype=np.float32)

        if samples.ndim != 2:
            raise InvalidInputError(
                f"[Dataset] samples must be 2-D (m, feature_length), got shape {samples.shape}"
            )
        if labels.ndim != 1:
            raise InvalidInputError(
                f"[Dataset] labels must be 1-D, got shape {labels.shape}"
            )

        samples.setflags(write=False)
        labels.setflags(write=False)
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "labels", labels)

    @classmethod
    def from_sequences(
        cls,
        samples: Sequence[Sequence[float]],
        labels: Sequence[float],
    ) -> "Dataset":
        """
        Build from plain python sequences; ragged rows are rejected.
        """
        lengths = {len(row) for row in samples}
        if len(lengths) > 1:
            raise InvalidInputError(
                f"[Dataset] feature vectors differ in length: {sorted(lengths)}"
            )
        if not samples:
            return cls(np.empty((0, 0), dtype=np.float32), np.asarray(labels))
        return cls(np.asarray(samples), np.asarray(labels))

    def __len__(self) -> int:
        return self.samples.shape[0]

    @property
    def feature_length(self) -> int:
        return self.samples.shape[1]
