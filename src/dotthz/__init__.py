"""
dotThz is an exchange format for terahertz time-domain spectroscopy data
built on `HDF5 <https://www.hdfgroup.org>`_. This package reads and writes
dotThz files with `h5py <https://www.h5py.org>`_. A file holds any number of
measurement groups; each group carries:

* a :class:`.DotthzMetaData` record, stored as group attributes: user,
  instrument, date and time of the measurement plus a free-form ordered
  key/value map (:attr:`~.DotthzMetaData.md`)
* zero or more floating point datasets, read and written as
  :class:`numpy.ndarray`

Files are accessed through :class:`.DotthzFile`. Groups and datasets can be
browsed with the :class:`.DotthzGroup` and :class:`.DotthzDataset` views.
"""

from __future__ import annotations

from ._version import version as __version__
from .exceptions import (
    AlreadyExistsError,
    DotthzError,
    DotthzIOError,
    FormatError,
    NotFoundError,
    TypeMismatchError,
)
from .file import DotthzFile
from .metadata import DotthzMetaData
from .tools import copy, ls, show
from .views import DotthzDataset, DotthzGroup

__all__ = [
    "AlreadyExistsError",
    "DotthzDataset",
    "DotthzError",
    "DotthzFile",
    "DotthzGroup",
    "DotthzIOError",
    "DotthzMetaData",
    "FormatError",
    "NotFoundError",
    "TypeMismatchError",
    "copy",
    "ls",
    "show",
    "__version__",
]
