from __future__ import annotations

from pathlib import Path

import h5py


class DotthzError(Exception):
    """Base class for errors raised while accessing dotThz files."""

    def __init__(
        self,
        message: str,
        file: str | Path | h5py.File | None = None,
        obj: str | None = None,
    ) -> None:
        super().__init__(message)

        self.file = file.filename if isinstance(file, h5py.File) else file
        if isinstance(self.file, Path):
            self.file = str(self.file)
        self.obj = obj

    def __str__(self) -> str:
        if self.file is None:
            return super().__str__()

        if self.obj is None:
            msg = f"while accessing file {self.file}: "
        else:
            msg = f"while accessing object '{self.obj}' in file {self.file}: "

        return msg + super().__str__()

    def __reduce__(self) -> tuple:  # for pickling.
        return self.__class__, (*self.args, self.file, self.obj)


class NotFoundError(DotthzError):
    """A file, group, dataset or attribute does not exist."""


class AlreadyExistsError(DotthzError):
    """A file, group or dataset to be created exists already."""


class FormatError(DotthzError):
    """The file is not an HDF5 file or an object has an unexpected structure."""


class TypeMismatchError(DotthzError):
    """Array data cannot be converted losslessly to the requested type."""


class DotthzIOError(DotthzError):
    """The underlying file could not be read or written."""
