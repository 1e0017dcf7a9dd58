"""Convenience routines to inspect and copy dotThz files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from . import utils
from .file import DotthzFile

log = logging.getLogger(__name__)


def ls(path: str | Path) -> list[str]:
    """Return the names of the measurement groups in a dotThz file."""
    log.debug(f"Listing groups in '{path}'")
    with DotthzFile.open_ro(path) as f:
        return f.get_group_names()


def show(path: str | Path, attrs: bool = False, detail: bool = False) -> None:
    """Print a tree of the groups and datasets in a dotThz file.

    Parameters
    ----------
    path
        the dotThz file.
    attrs
        print the metadata of each group too.
    detail
        print the storage size of each dataset.

    Examples
    --------
    >>> from dotthz import show
    >>> show("sample.thz")
    sample.thz
    └── Measurement
        ├── ds1 · float64 (2, 1000)
        └── ds2 · float64 (2, 1000)
    """
    with DotthzFile.open_ro(path) as f:
        print(f"\033[1m{path}\033[0m")  # noqa: T201

        groups = f.get_groups()
        if len(groups) == 0:
            print("└──  empty")  # noqa: T201
            return

        for i, group in enumerate(groups):
            last_group = i == len(groups) - 1
            char = "└──" if last_group else "├──"
            indent = "    " if last_group else "│   "

            _attrs = ""
            if attrs:
                _attrs = "── " + str(group.meta_data.to_dict())

            print(f"{char} \033[1m{group.name}\033[0m {_attrs}")  # noqa: T201

            datasets = group.get_datasets()
            for j, ds in enumerate(datasets):
                char = "└──" if j == len(datasets) - 1 else "├──"
                desc = f"· {ds.dtype} {ds.shape}"
                if detail:
                    nbytes = ds.size * ds.dtype.itemsize
                    desc += f" \033[3mnbytes\033[0m={utils.fmtbytes(nbytes)}"
                print(f"{indent}{char} {ds.name} {desc}")  # noqa: T201


def copy(src: str | Path, dst: str | Path, overwrite: bool = False) -> str:
    """Copy all groups of a dotThz file into a new file.

    Metadata and datasets are read and written again, so the copy follows
    the dotThz layout even if the source was written by another tool.

    Parameters
    ----------
    src
        source file.
    dst
        destination file.
    overwrite
        truncate `dst` if it exists, otherwise fail with
        :class:`.AlreadyExistsError`.

    Returns
    -------
    the expanded destination path.

    Note
    ----
    If a group or dataset of `src` cannot be written (e.g. an integer
    dataset), the partially written `dst` is removed before the error is
    raised. With `overwrite`, a previously existing `dst` is lost as well.
    """
    log.debug(f"copying '{src}' to '{dst}'")
    with DotthzFile.open_ro(src) as fin:
        opener = DotthzFile.create if overwrite else DotthzFile.create_excl
        fout = opener(dst)
        try:
            with fout:
                for name in fin.get_group_names():
                    group = fout.add_group(name, fin.get_meta_data(name))
                    for ds in fin.get_dataset_names(name):
                        group.add_dataset(ds, fin.get_dataset(name, ds))
        except Exception:
            log.debug(f"removing incomplete copy '{fout.filename}'")
            os.remove(fout.filename)
            raise

        return fout.filename
