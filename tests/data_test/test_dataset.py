# tests/data_test/test_dataset.py
import numpy as np
import pytest

from gdlogit.data.dataset import Dataset
from gdlogit.utils.errors import InvalidInputError


def test_dataset_shape_and_dtype(and_dataset):
    assert len(and_dataset) == 4
    assert and_dataset.feature_length == 2
    assert and_dataset.samples.dtype == np.float32
    assert and_dataset.labels.dtype == np.float32


def test_dataset_is_read_only(and_dataset):
    with pytest.raises(ValueError):
        and_dataset.samples[0, 0] = 5.0

    with pytest.raises(ValueError):
        and_dataset.labels[0] = 1.0


def test_dataset_copies_caller_arrays():
    X = np.zeros((2, 2))
    ds = Dataset(samples=X, labels=np.zeros(2))

    X[0, 0] = 9.0

    assert ds.samples[0, 0] == 0.0


def test_ragged_rows_rejected():
    with pytest.raises(InvalidInputError, match="differ in length"):
        Dataset.from_sequences([[1.0, 2.0], [1.0]], [0.0, 1.0])


def test_one_dimensional_samples_rejected():
    with pytest.raises(InvalidInputError, match="2-D"):
        Dataset(samples=np.zeros(3), labels=np.zeros(3))


def test_two_dimensional_labels_rejected():
    with pytest.raises(InvalidInputError, match="1-D"):
        Dataset(samples=np.zeros((3, 2)), labels=np.zeros((3, 1)))
