"""
Lightweight views of the groups and datasets in a :class:`.DotthzFile`.

Views keep only names and a reference to the owning file. Every access goes
through the file, so a view stops working once the file is closed.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from .metadata import DotthzMetaData

if TYPE_CHECKING:
    from .file import DotthzFile


class DotthzGroup:
    """A measurement group inside a :class:`.DotthzFile`.

    Examples
    --------
    >>> group = f.get_group("Measurement")
    >>> group.get_dataset_names()
    ['ds1', 'ds2']
    >>> group.meta_data.instrument
    'TeraFlash'
    """

    def __init__(self, file: DotthzFile, name: str) -> None:
        self._file = file
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def file(self) -> DotthzFile:
        return self._file

    @property
    def meta_data(self) -> DotthzMetaData:
        return self._file.get_meta_data(self._name)

    def set_meta_data(self, meta_data: DotthzMetaData) -> None:
        self._file.set_meta_data(self._name, meta_data)

    def delete_meta_data_attribute(self, key: str) -> None:
        self._file.delete_meta_data_attribute(self._name, key)

    def get_dataset_names(self) -> list[str]:
        return self._file.get_dataset_names(self._name)

    def get_datasets(self) -> list[DotthzDataset]:
        return self._file.get_datasets(self._name)

    def get_dataset(self, dataset_name: str, dtype: DTypeLike = None) -> np.ndarray:
        return self._file.get_dataset(self._name, dataset_name, dtype)

    def add_dataset(
        self, dataset_name: str, data: ArrayLike, **h5py_kwargs: Any
    ) -> DotthzDataset:
        return self._file.add_dataset(self._name, dataset_name, data, **h5py_kwargs)

    def __contains__(self, dataset_name: str) -> bool:
        return dataset_name.strip("/") in self.get_dataset_names()

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_dataset_names())

    def __len__(self) -> int:
        return len(self.get_dataset_names())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DotthzGroup):
            return (
                self._file.filename == other._file.filename
                and self._name == other._name
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._file.filename, self._name))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"


class DotthzDataset:
    """A floating point dataset inside a measurement group."""

    def __init__(self, file: DotthzFile, group_name: str, name: str) -> None:
        self._file = file
        self._group_name = group_name
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def group_name(self) -> str:
        return self._group_name

    @property
    def shape(self) -> tuple[int, ...]:
        return self._file._h5_dataset(self._group_name, self._name).shape

    @property
    def dtype(self) -> np.dtype:
        return self._file._h5_dataset(self._group_name, self._name).dtype

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return int(np.prod(self.shape))

    def read(self, dtype: DTypeLike = None) -> np.ndarray:
        """Read the data into a new array, see :meth:`.DotthzFile.get_dataset`."""
        return self._file.get_dataset(self._group_name, self._name, dtype)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(group_name={self._group_name!r}, "
            f"name={self._name!r})"
        )
