from __future__ import annotations

import logging

from ...exceptions import DotthzIOError
from ..utils import (
    DS_DESCRIPTION_ATTR,
    FIELD_ATTRS,
    LIST_SEPARATOR,
    MD_DESCRIPTION_ATTR,
    STR_DTYPE,
    USER_ATTR,
    USER_FIELDS,
    USER_SEPARATOR,
    is_reserved_name,
    md_attr_index,
    md_attr_name,
)

log = logging.getLogger(__name__)


def check_meta_data(meta_data):
    """Make sure `meta_data` can be laid out as attributes.

    Raises :class:`ValueError` for free-form keys that would corrupt the
    layout. Only logs a warning for values that won't read back identically.
    """
    for key in meta_data.md:
        if not key:
            msg = "metadata keys must not be empty"
            raise ValueError(msg)
        if LIST_SEPARATOR in key:
            msg = f"metadata key {key!r} must not contain {LIST_SEPARATOR!r}"
            raise ValueError(msg)
        if is_reserved_name(key):
            msg = f"metadata key {key!r} is reserved by the dotThz layout"
            raise ValueError(msg)

    for field in USER_FIELDS:
        if USER_SEPARATOR in getattr(meta_data, field):
            log.warning(
                f"{field} {getattr(meta_data, field)!r} contains {USER_SEPARATOR!r} "
                "and will not be read back identically"
            )

    for entry in meta_data.ds_description:
        if LIST_SEPARATOR in entry:
            log.warning(
                f"dataset description {entry!r} contains {LIST_SEPARATOR!r} "
                "and will be split when read back"
            )


def _write_str_attr(h5g, name, value, fname):
    try:
        # create() replaces an existing attribute of the same name
        h5g.attrs.create(name, value, dtype=STR_DTYPE)
    except (OSError, TypeError) as e:
        msg = f"could not write attribute '{name}': {e}"
        raise DotthzIOError(msg, fname, h5g.name) from e


def _h5_write_md(md, h5g, fname):
    _write_str_attr(h5g, MD_DESCRIPTION_ATTR, [LIST_SEPARATOR.join(md.keys())], fname)

    for i, value in enumerate(md.values()):
        _write_str_attr(h5g, md_attr_name(i), str(value), fname)

    # drop values left over from a longer map
    for name in list(h5g.attrs.keys()):
        index = md_attr_index(name)
        if index is not None and index >= len(md):
            log.debug(f"deleting stale attribute '{name}' of {h5g.name}")
            del h5g.attrs[name]


def _h5_write_meta_data(meta_data, h5g, fname):
    check_meta_data(meta_data)

    for field, attr in FIELD_ATTRS.items():
        _write_str_attr(h5g, attr, getattr(meta_data, field), fname)

    user = USER_SEPARATOR.join(getattr(meta_data, f) for f in USER_FIELDS)
    _write_str_attr(h5g, USER_ATTR, user, fname)

    _h5_write_md(meta_data.md, h5g, fname)

    _write_str_attr(
        h5g,
        DS_DESCRIPTION_ATTR,
        [LIST_SEPARATOR.join(meta_data.ds_description)],
        fname,
    )
