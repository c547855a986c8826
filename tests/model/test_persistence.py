# tests/model/test_persistence.py
import struct

import numpy as np
import pytest

from gdlogit.model.params import ModelParams
from gdlogit.model.persistence import (
    MAX_FEATURE_LENGTH,
    expected_file_size,
    load_model,
    store_model,
)
from gdlogit.utils.errors import ModelIOError


@pytest.fixture
def params() -> ModelParams:
    return ModelParams(weights=np.array([0.1, -2.5, 3.75e-8], dtype=np.float32), bias=-0.3)


def test_round_trip_is_bit_exact(params, model_path):
    store_model(params, model_path)
    loaded = load_model(model_path)

    assert loaded.weights.tobytes() == params.weights.tobytes()
    assert np.float32(loaded.bias).tobytes() == np.float32(params.bias).tobytes()


def test_file_layout(params, model_path):
    store_model(params, model_path)
    raw = model_path.read_bytes()

    assert len(raw) == expected_file_size(3) == 4 + 3 * 4 + 4
    n, w0, w1, w2, b = struct.unpack("<i3ff", raw)
    assert n == 3
    assert (w0, w1, w2) == tuple(float(w) for w in params.weights)
    assert b == float(params.bias)


def test_store_leaves_no_tmp_file(params, model_path):
    store_model(params, model_path)

    assert [p.name for p in model_path.parent.iterdir()] == [model_path.name]


def test_store_creates_parent_dirs(params, tmp_path):
    path = tmp_path / "a" / "b" / "model.bin"

    store_model(params, path)

    assert path.exists()


def test_store_to_unwritable_destination(params, tmp_path):
    target = tmp_path / "is_a_dir"
    target.mkdir()

    with pytest.raises(ModelIOError, match="open file fail"):
        store_model(params, target)


def test_load_missing_file(tmp_path):
    with pytest.raises(ModelIOError, match="open file fail"):
        load_model(tmp_path / "missing.bin")


def test_load_truncated_file(params, model_path):
    store_model(params, model_path)
    model_path.write_bytes(model_path.read_bytes()[:-2])

    with pytest.raises(ModelIOError, match="expected 20 bytes"):
        load_model(model_path)


def test_load_trailing_bytes_rejected(params, model_path):
    store_model(params, model_path)
    model_path.write_bytes(model_path.read_bytes() + b"\x00")

    with pytest.raises(ModelIOError):
        load_model(model_path)


@pytest.mark.parametrize("length", [0, -1, MAX_FEATURE_LENGTH + 1, 2**31 - 1])
def test_load_rejects_insane_length(tmp_path, length):
    path = tmp_path / "bad.bin"
    path.write_bytes(struct.pack("<i", length) + b"\x00" * 8)

    with pytest.raises(ModelIOError, match="weight length"):
        load_model(path)


def test_load_too_short_for_header(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"\x01\x00")

    with pytest.raises(ModelIOError, match="too short"):
        load_model(path)


def test_load_directory_is_not_a_model(tmp_path):
    with pytest.raises(ModelIOError, match="no such file"):
        load_model(tmp_path)
