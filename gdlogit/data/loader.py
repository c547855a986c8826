# gdlogit/data/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from gdlogit.utils.logger import logs
from gdlogit.data.dataset import Dataset
from gdlogit.utils.errors import InvalidInputError


def load_csv_dataset(
    path: str | Path,
    *,
    label_column: Optional[str] = None,
    feature_length: Optional[int] = None,
) -> Dataset:
    """
    Read a numeric CSV (with header) into a Dataset.

    - label_column: column holding the 0/1 label, default = last column
    - every other column is a feature, in file order
    - feature_length: when given, the feature column count must match
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"[Loader] dataset not found: {path}")

    df = pd.read_csv(path)
    if df.shape[1] < 2:
        raise InvalidInputError(
            f"[Loader] need at least one feature column and a label column: {path}"
        )

    if label_column is None:
        label_column = df.columns[-1]
    if label_column not in df.columns:
        raise InvalidInputError(f"[Loader] label column '{label_column}' not in {list(df.columns)}")

    feature_columns = [c for c in df.columns if c != label_column]
    if feature_length is not None and len(feature_columns) != feature_length:
        raise InvalidInputError(
            f"[Loader] expected {feature_length} feature columns, got {len(feature_columns)}"
        )

    try:
        X = df[feature_columns].to_numpy(dtype=np.float32)
        y = df[label_column].to_numpy(dtype=np.float32)
    except ValueError as e:
        raise InvalidInputError(f"[Loader] non-numeric value in {path}: {e}") from e

    if np.isnan(X).any() or np.isnan(y).any():
        raise InvalidInputError(f"[Loader] missing values in {path}")

    if not np.isin(y, (0.0, 1.0)).all():
        logs.warning(f"[Loader] {path.name}: labels outside {{0, 1}}, trained as regression targets")

    logs.info(
        f"[Loader] {path.name}: samples={len(df)} features={len(feature_columns)} "
        f"label={label_column}"
    )
    return Dataset(samples=X, labels=y)
