from __future__ import annotations

import logging

import h5py
import numpy as np

from ..utils import LIST_SEPARATOR

log = logging.getLogger(__name__)


def read_attr(h5o, name, fname, oname):
    """Read attribute `name` of an HDF5 object, ``None`` if it can't be read.

    Missing attributes are expected in partially written files, so they are
    not an error.
    """
    try:
        return h5o.attrs[name]
    except KeyError:
        return None
    except (OSError, TypeError) as e:
        log.warning(f"could not read attribute '{name}' of {oname} in {fname}: {e}")
        return None


def _element_to_str(value) -> str:
    if isinstance(value, (bytes, np.bytes_)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def attr_to_str(value) -> str:
    """Decode a string or numeric attribute value.

    Arrays are represented by their first element.
    """
    if value is None or isinstance(value, h5py.Empty):
        return ""

    if isinstance(value, np.ndarray):
        if value.size == 0:
            return ""
        value = value.flat[0]

    return _element_to_str(value)


def attr_to_list(value) -> list[str]:
    """Decode a list attribute.

    Multi-valued attributes hold one entry per element, single values are
    split on ``", "``.
    """
    if isinstance(value, np.ndarray) and value.size > 1:
        return [_element_to_str(v) for v in value.flat]

    joined = attr_to_str(value)
    if joined == "":
        return []

    return joined.split(LIST_SEPARATOR)
