"""
This module implements the handle to a dotThz file, the HDF5 based exchange
format for terahertz time-domain spectroscopy measurements.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import h5py
import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from . import _serializers, utils
from ._serializers.utils import FIELD_ALIASES, MD_DESCRIPTION_ATTR, md_attr_index
from .exceptions import (
    AlreadyExistsError,
    DotthzIOError,
    FormatError,
    NotFoundError,
)
from .metadata import DotthzMetaData
from .views import DotthzDataset, DotthzGroup

log = logging.getLogger(__name__)

_mode_aliases: dict[str, str] = {
    "read": "r",
    "read_write": "r+",
    "create": "w",
    "create_excl": "x",
    "w-": "x",
    "append": "a",
}
"""Long names of the supported :class:`h5py.File` modes."""

_format_errors = ("file signature not found", "truncated file", "bad superblock")
"""Fragments of libhdf5 messages about files that are not readable HDF5."""


class DotthzFile:
    """A file following the dotThz standard.

    A dotThz file holds any number of measurement groups. Each group carries
    a :class:`.DotthzMetaData` record as attributes and zero or more
    floating point datasets.

    Use one of the class methods to get a handle, preferably as a context
    manager so the file gets closed on exit.

    Examples
    --------
    >>> import numpy as np
    >>> from dotthz import DotthzFile, DotthzMetaData
    >>> with DotthzFile.create("sample.thz") as f:
    ...     f.add_group("Measurement", DotthzMetaData(user="John Doe"))
    ...     f.add_dataset("Measurement", "ds1", np.zeros((2, 1000)))
    >>> with DotthzFile.open_ro("sample.thz") as f:
    ...     f.get_meta_data("Measurement").user
    'John Doe'
    """

    def __init__(self, h5file: h5py.File) -> None:
        """
        Parameters
        ----------
        h5file
            an open :class:`h5py.File`. The new object takes ownership of it.
        """
        self._file = h5file
        self._filename = h5file.filename

    @classmethod
    def open_as(
        cls, path: str | Path, mode: str = "r", **file_kwargs: Any
    ) -> DotthzFile:
        """Open a file in a given mode.

        Parameters
        ----------
        path
            file name. Environment variables and ``~`` are expanded.
        mode
            - ``read`` or ``r``: read-only, file must exist.
            - ``read_write`` or ``r+``: read/write, file must exist.
            - ``create`` or ``w``: create file, truncate if it exists.
            - ``create_excl``, ``x`` or ``w-``: create file, fail if it
              exists.
            - ``append`` or ``a``: read/write if it exists, create otherwise.
        file_kwargs
            keyword arguments forwarded to :class:`h5py.File`.
        """
        h5mode = _mode_aliases.get(mode, mode)
        if h5mode not in ("r", "r+", "w", "x", "a"):
            msg = f"unknown mode '{mode}'"
            raise ValueError(msg)

        path = utils.expand_path(path)
        file_exists = os.path.exists(path)

        if h5mode in ("r", "r+") and not file_exists:
            msg = f"file {path} not found"
            raise NotFoundError(msg, path)

        if h5mode == "x" and file_exists:
            msg = "file exists already"
            raise AlreadyExistsError(msg, path)

        if not file_exists:
            directory = os.path.dirname(os.path.abspath(path))
            if not os.path.isdir(directory):
                msg = f"directory {directory} does not exist"
                raise DotthzIOError(msg, path)

        if "locking" not in file_kwargs:
            locking = utils.getenv_bool("DOTTHZ_FILE_LOCKING", default=None)
            if locking is not None:
                file_kwargs["locking"] = locking

        log.debug(f"opening file {path} in mode '{h5mode}'")
        try:
            h5f = h5py.File(path, h5mode, **file_kwargs)
        except PermissionError as e:
            raise DotthzIOError(str(e), path) from e
        except FileExistsError as e:
            raise AlreadyExistsError(str(e), path) from e
        except OSError as e:
            # other failures on a file with a valid superblock (lock
            # conflicts, damaged object headers) stay DotthzIOError
            if any(s in str(e) for s in _format_errors):
                msg = f"not a readable HDF5 file ({e})"
                raise FormatError(msg, path) from e
            raise DotthzIOError(str(e), path) from e

        return cls(h5f)

    @classmethod
    def create(cls, path: str | Path, **file_kwargs: Any) -> DotthzFile:
        """Create an empty file, truncate if it exists."""
        return cls.open_as(path, "w", **file_kwargs)

    @classmethod
    def create_excl(cls, path: str | Path, **file_kwargs: Any) -> DotthzFile:
        """Create an empty file, fail if it exists."""
        return cls.open_as(path, "x", **file_kwargs)

    @classmethod
    def open(cls, path: str | Path, **file_kwargs: Any) -> DotthzFile:
        """Open an existing file for reading and writing."""
        return cls.open_as(path, "r+", **file_kwargs)

    @classmethod
    def open_ro(cls, path: str | Path, **file_kwargs: Any) -> DotthzFile:
        """Open an existing file read-only."""
        return cls.open_as(path, "r", **file_kwargs)

    @classmethod
    def append(cls, path: str | Path, **file_kwargs: Any) -> DotthzFile:
        """Open a file for reading and writing if it exists, create it otherwise."""
        return cls.open_as(path, "a", **file_kwargs)

    @property
    def h5file(self) -> h5py.File:
        """The underlying :class:`h5py.File`."""
        if not self._file:
            msg = "file is closed"
            raise DotthzIOError(msg, self._filename)
        return self._file

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def mode(self) -> str:
        """``r`` or ``r+``, as reported by :mod:`h5py`."""
        return self.h5file.mode

    @property
    def closed(self) -> bool:
        return not self._file

    def is_read_only(self) -> bool:
        return self.mode == "r"

    def size(self) -> int:
        """File size in bytes."""
        return self.h5file.id.get_filesize()

    def free_space(self) -> int:
        """Free space in the file in bytes."""
        return self.h5file.id.get_freespace()

    def userblock(self) -> int:
        """Userblock size in bytes."""
        return self.h5file.userblock_size

    def access_plist(self) -> h5py.h5p.PropFAID:
        """A copy of the file access property list."""
        return self.h5file.id.get_access_plist()

    fapl = access_plist

    def create_plist(self) -> h5py.h5p.PropFCID:
        """A copy of the file creation property list."""
        return self.h5file.id.get_create_plist()

    fcpl = create_plist

    def flush(self) -> None:
        """Flush buffers to the storage medium."""
        self.h5file.flush()

    def close(self) -> None:
        """Close the file. Views of its groups and datasets become unusable."""
        if self._file:
            log.debug(f"closing file {self._filename}")
            self._file.close()

    def __enter__(self) -> DotthzFile:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _check_writable(self) -> None:
        if self.is_read_only():
            msg = "file is opened read-only"
            raise DotthzIOError(msg, self._filename)

    def _h5_group(self, group_name: str) -> h5py.Group:
        name = utils.normalize_name(group_name)
        h5g = self.h5file.get(name)
        if not isinstance(h5g, h5py.Group):
            msg = f"group '{name}' not found"
            raise NotFoundError(msg, self._filename, name)
        return h5g

    def _h5_dataset(self, group_name: str, dataset_name: str) -> h5py.Dataset:
        h5g = self._h5_group(group_name)
        name = utils.normalize_name(dataset_name)
        h5d = h5g.get(name)
        if h5d is None:
            msg = f"dataset '{name}' not found"
            raise NotFoundError(msg, self._filename, h5g.name)
        if not isinstance(h5d, h5py.Dataset):
            msg = f"'{name}' is not a dataset"
            raise FormatError(msg, self._filename, h5g.name)
        return h5d

    def get_group_names(self) -> list[str]:
        """Names of the groups in the file, in HDF5 order."""
        return [k for k, v in self.h5file.items() if isinstance(v, h5py.Group)]

    def get_group(self, group_name: str) -> DotthzGroup:
        h5g = self._h5_group(group_name)
        return DotthzGroup(self, h5g.name.lstrip("/"))

    def get_groups(self) -> list[DotthzGroup]:
        return [DotthzGroup(self, name) for name in self.get_group_names()]

    def __contains__(self, group_name: str) -> bool:
        return group_name.strip("/") in self.get_group_names()

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_group_names())

    def __len__(self) -> int:
        return len(self.get_group_names())

    def add_group(self, group_name: str, meta_data: DotthzMetaData) -> DotthzGroup:
        """Add a measurement group and write its metadata.

        Fails with :class:`.AlreadyExistsError` if the group exists, leaving
        it untouched.
        """
        name = utils.normalize_name(group_name)
        self._check_writable()
        _serializers.check_meta_data(meta_data)

        if name in self.h5file:
            msg = "object exists already"
            raise AlreadyExistsError(msg, self._filename, name)

        log.debug(f"creating group '{name}' in {self._filename}")
        try:
            h5g = self.h5file.create_group(name)
        except (OSError, ValueError) as e:
            msg = f"could not create group: {e}"
            raise DotthzIOError(msg, self._filename, name) from e

        _serializers._h5_write_meta_data(meta_data, h5g, self._filename)

        return DotthzGroup(self, name)

    def get_meta_data(self, group_name: str) -> DotthzMetaData:
        """Read the metadata record of a group.

        Missing attributes are read as empty values, so partially written
        files stay readable. An attribute that is absent cannot be told
        apart from one holding an empty string.
        """
        h5g = self._h5_group(group_name)
        return _serializers._h5_read_meta_data(h5g, self._filename, h5g.name)

    def set_meta_data(self, group_name: str, meta_data: DotthzMetaData) -> None:
        """Overwrite the metadata record of an existing group.

        Attributes are written one by one, a failure halfway through leaves
        the record partially updated.
        """
        h5g = self._h5_group(group_name)
        self._check_writable()
        _serializers._h5_write_meta_data(meta_data, h5g, self._filename)

    def delete_meta_data_attribute(self, group_name: str, key: str) -> None:
        """Remove a single metadata entry from a group.

        `key` is looked up as a free-form metadata key first, then as a
        record field name (e.g. ``version``) and finally as a raw attribute
        name. The attributes holding the free-form map (``mdDescription``,
        ``md1`` ...) cannot be deleted by their raw name.
        """
        h5g = self._h5_group(group_name)
        self._check_writable()

        meta_data = _serializers._h5_read_meta_data(h5g, self._filename, h5g.name)
        if key in meta_data.md:
            log.debug(f"deleting metadata entry '{key}' of {h5g.name}")
            del meta_data.md[key]
            _serializers._h5_write_md(meta_data.md, h5g, self._filename)
            return

        attr = FIELD_ALIASES.get(key, key)
        # md values are only reachable through their key
        if (
            attr not in h5g.attrs
            or attr == MD_DESCRIPTION_ATTR
            or md_attr_index(attr) is not None
        ):
            msg = f"attribute '{key}' not found"
            raise NotFoundError(msg, self._filename, h5g.name)

        log.debug(f"deleting attribute '{attr}' of {h5g.name}")
        del h5g.attrs[attr]

    remove_meta_data_attribute = delete_meta_data_attribute

    def add_dataset(
        self,
        group_name: str,
        dataset_name: str,
        data: ArrayLike,
        **h5py_kwargs: Any,
    ) -> DotthzDataset:
        """Write a copy of a floating point array to a new dataset.

        Parameters
        ----------
        group_name
            name of an existing group.
        dataset_name
            name of the new dataset.
        data
            n-dimensional array of ``float16``, ``float32`` or ``float64``.
        h5py_kwargs
            keyword arguments forwarded to :meth:`h5py.Group.create_dataset`,
            taking precedence over :data:`.settings.DEFAULT_HDF5_SETTINGS`.
        """
        h5g = self._h5_group(group_name)
        name = utils.normalize_name(dataset_name)
        self._check_writable()

        _serializers._h5_write_dataset(data, name, h5g, self._filename, **h5py_kwargs)

        return DotthzDataset(self, h5g.name.lstrip("/"), name)

    def get_dataset(
        self, group_name: str, dataset_name: str, dtype: DTypeLike = None
    ) -> np.ndarray:
        """Read a dataset into a new array.

        Parameters
        ----------
        dtype
            if not ``None``, convert the data to this type. Fails with
            :class:`.TypeMismatchError` if the conversion would lose
            precision.
        """
        h5d = self._h5_dataset(group_name, dataset_name)
        return _serializers._h5_read_dataset(h5d, self._filename, h5d.name, dtype)

    def get_dataset_names(self, group_name: str) -> list[str]:
        h5g = self._h5_group(group_name)
        return [k for k, v in h5g.items() if isinstance(v, h5py.Dataset)]

    def get_datasets(self, group_name: str) -> list[DotthzDataset]:
        name = utils.normalize_name(group_name)
        return [DotthzDataset(self, name, ds) for ds in self.get_dataset_names(name)]

    def __repr__(self) -> str:
        if self.closed:
            return f"<closed {self.__class__.__name__} {self._filename!r}>"
        return f"{self.__class__.__name__}({self._filename!r}, mode={self.mode!r})"
