from __future__ import annotations

from typing import Any


def default_hdf5_settings() -> dict[str, Any]:
    """Returns the HDF5 settings for writing datasets to disk to the dotthz defaults.

    No filters are enabled by default, datasets are stored contiguously.

    Examples
    --------
    >>> from dotthz import settings
    >>> settings.DEFAULT_HDF5_SETTINGS["compression"] = "gzip"
    >>> f.add_dataset("Sample", "ds1", data)  # compressed with GZIP
    >>> settings.DEFAULT_HDF5_SETTINGS = settings.default_hdf5_settings()
    """

    return {}


DEFAULT_HDF5_SETTINGS: dict[str, Any] = default_hdf5_settings()
"""Global dictionary storing the default HDF5 settings for writing datasets.

Keys are keyword arguments of :meth:`h5py.Group.create_dataset`. Modify this
global variable before writing data to disk with this package.

Examples
--------
>>> from dotthz import settings
>>> settings.DEFAULT_HDF5_SETTINGS["compression"] = "lzf"
>>> f.add_dataset("Sample", "ds1", data)  # compressed with LZF
"""
