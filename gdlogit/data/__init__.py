from gdlogit.data.dataset import Dataset
from gdlogit.data.loader import load_csv_dataset

__all__ = ["Dataset", "load_csv_dataset"]
