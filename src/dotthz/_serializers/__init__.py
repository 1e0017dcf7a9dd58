from __future__ import annotations

from .read.dataset import _h5_read_dataset
from .read.metadata import _h5_read_meta_data
from .write.dataset import _h5_write_dataset
from .write.metadata import _h5_write_md, _h5_write_meta_data, check_meta_data

__all__ = [
    "_h5_read_dataset",
    "_h5_read_meta_data",
    "_h5_write_dataset",
    "_h5_write_md",
    "_h5_write_meta_data",
    "check_meta_data",
]
