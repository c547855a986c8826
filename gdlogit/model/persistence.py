# gdlogit/model/persistence.py
"""
Model file layout (little-endian, no header / magic / version):

    [int32 N][float32 x N weights][float32 bias]

Loading validates N against MAX_FEATURE_LENGTH and the file size against
4 + 4N + 4 before allocating anything, so a truncated or foreign file is
rejected instead of producing garbage parameters.
"""
from __future__ import annotations

from pathlib import Path

import numpy as np

from gdlogit.utils.logger import logs
from gdlogit.model.params import ModelParams
from gdlogit.utils.errors import ModelIOError
from gdlogit.utils.filesystem import FileSystem

_LENGTH_DTYPE = np.dtype("<i4")
_VALUE_DTYPE = np.dtype("<f4")

MAX_FEATURE_LENGTH = 1 << 24


def expected_file_size(feature_length: int) -> int:
    return _LENGTH_DTYPE.itemsize + _VALUE_DTYPE.itemsize * (feature_length + 1)


def encode_model(params: ModelParams) -> bytes:
    n = params.feature_length
    return (
        np.array([n], dtype=_LENGTH_DTYPE).tobytes()
        + params.weights.astype(_VALUE_DTYPE).tobytes()
        + np.array([params.bias], dtype=_VALUE_DTYPE).tobytes()
    )


def decode_model(data: bytes, source: str = "<bytes>") -> ModelParams:
    if len(data) < _LENGTH_DTYPE.itemsize:
        raise ModelIOError(f"[Model] {source}: file too short ({len(data)} bytes)")

    n = int(np.frombuffer(data, dtype=_LENGTH_DTYPE, count=1)[0])
    if n <= 0 or n > MAX_FEATURE_LENGTH:
        raise ModelIOError(
            f"[Model] {source}: weight length {n} outside (0, {MAX_FEATURE_LENGTH}]"
        )

    expected = expected_file_size(n)
    if len(data) != expected:
        raise ModelIOError(
            f"[Model] {source}: expected {expected} bytes for {n} weights, got {len(data)}"
        )

    values = np.frombuffer(data, dtype=_VALUE_DTYPE, count=n + 1, offset=_LENGTH_DTYPE.itemsize)
    return ModelParams(weights=values[:n].astype(np.float32), bias=values[n])


def store_model(params: ModelParams, path: str | Path) -> Path:
    """
    Write ``params`` to ``path`` atomically.

    Raises ModelIOError when the destination cannot be written.
    """
    path = Path(path)
    try:
        FileSystem.safe_write(path, encode_model(params))
    except OSError as e:
        raise ModelIOError(f"[Model] open file fail: {path}: {e}") from e

    logs.info(f"[Model] stored {params.feature_length} weights -> {path}")
    return path


def load_model(path: str | Path) -> ModelParams:
    """
    Read parameters from ``path``.

    Raises ModelIOError when the file is missing, unreadable or malformed.
    """
    path = Path(path)
    if not FileSystem.file_exists(path):
        raise ModelIOError(f"[Model] open file fail: {path}: no such file")

    size = FileSystem.get_file_size(path)
    if size > expected_file_size(MAX_FEATURE_LENGTH):
        raise ModelIOError(f"[Model] {path}: {size} bytes is larger than any valid model")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ModelIOError(f"[Model] open file fail: {path}: {e}") from e

    params = decode_model(data, source=str(path))
    logs.info(f"[Model] loaded {params.feature_length} weights <- {path}")
    return params
