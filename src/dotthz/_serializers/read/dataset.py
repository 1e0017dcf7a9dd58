from __future__ import annotations

import logging

import h5py
import numpy as np

from ...exceptions import FormatError, TypeMismatchError

log = logging.getLogger(__name__)


def _h5_read_dataset(h5d, fname, oname, dtype=None):
    if not isinstance(h5d, h5py.Dataset):
        msg = "does not seem to be an HDF5 dataset"
        raise FormatError(msg, fname, oname)

    if dtype is not None:
        dtype = np.dtype(dtype)
        if not np.can_cast(h5d.dtype, dtype, casting="safe"):
            msg = f"cannot read {h5d.dtype} data as {dtype} without loss"
            raise TypeMismatchError(msg, fname, oname)

    # returns a fresh array, the file can be closed afterwards
    nda = h5d[...]
    if isinstance(nda, h5py.Empty):
        msg = "dataset has no dataspace"
        raise FormatError(msg, fname, oname)

    nda = np.asarray(nda)
    if dtype is not None:
        nda = nda.astype(dtype, copy=False)

    return nda
