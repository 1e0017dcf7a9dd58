from __future__ import annotations

import logging

import numpy as np

from ... import settings
from ...exceptions import AlreadyExistsError, DotthzIOError, TypeMismatchError

log = logging.getLogger(__name__)


def _h5_write_dataset(data, name, h5g, fname, **h5py_kwargs):
    nda = np.asarray(data)

    if nda.dtype.kind != "f":
        msg = f"datasets must hold floating point numbers, got {nda.dtype}"
        raise TypeMismatchError(msg, fname, f"{h5g.name}/{name}")

    if name in h5g:
        msg = "object exists already"
        raise AlreadyExistsError(msg, fname, f"{h5g.name}/{name}")

    # set default HDF5 options
    for k, v in settings.DEFAULT_HDF5_SETTINGS.items():
        h5py_kwargs.setdefault(k, v)

    log.debug(f"writing {nda.dtype} array of shape {nda.shape} to {h5g.name}/{name}")
    try:
        return h5g.create_dataset(name, data=nda, **h5py_kwargs)
    except OSError as e:
        msg = f"could not create dataset: {e}"
        raise DotthzIOError(msg, fname, f"{h5g.name}/{name}") from e
