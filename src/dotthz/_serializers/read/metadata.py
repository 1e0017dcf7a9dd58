from __future__ import annotations

import logging

from ...metadata import DotthzMetaData
from ..utils import (
    DS_DESCRIPTION_ATTR,
    FIELD_ATTRS,
    MD_DESCRIPTION_ATTR,
    USER_ATTR,
    USER_FIELDS,
    USER_SEPARATOR,
    md_attr_name,
)
from .utils import attr_to_list, attr_to_str, read_attr

log = logging.getLogger(__name__)


def _h5_read_meta_data(h5g, fname, gname):
    meta_data = DotthzMetaData()

    for field, attr in FIELD_ATTRS.items():
        value = read_attr(h5g, attr, fname, gname)
        if value is not None:
            setattr(meta_data, field, attr_to_str(value))

    value = read_attr(h5g, USER_ATTR, fname, gname)
    if value is not None:
        # fewer than four parts leave the remaining fields empty
        parts = attr_to_str(value).split(USER_SEPARATOR)
        for field, part in zip(USER_FIELDS, parts):
            setattr(meta_data, field, part.strip())

    value = read_attr(h5g, DS_DESCRIPTION_ATTR, fname, gname)
    if value is not None:
        meta_data.ds_description = attr_to_list(value)

    value = read_attr(h5g, MD_DESCRIPTION_ATTR, fname, gname)
    if value is not None:
        for i, key in enumerate(attr_to_list(value)):
            md_value = read_attr(h5g, md_attr_name(i), fname, gname)
            if md_value is None:
                log.debug(f"'{key}' has no value in {gname} of {fname}, skipping")
                continue
            meta_data.md[key] = attr_to_str(md_value)

    return meta_data
