"""Attribute names and separators of the dotThz on-disk layout."""

from __future__ import annotations

import re
from collections import OrderedDict

import h5py

FIELD_ATTRS: dict[str, str] = OrderedDict(
    [
        ("description", "description"),
        ("date", "date"),
        ("instrument", "instrument"),
        ("mode", "mode"),
        ("version", "thzVer"),
        ("time", "time"),
    ]
)
"""Mapping between single-valued metadata fields and their attribute names."""

USER_ATTR = "user"
USER_FIELDS = ("orcid", "user", "email", "institution")
"""Fields packed into the ``user`` attribute, in on-disk order."""
USER_SEPARATOR = "/"

MD_DESCRIPTION_ATTR = "mdDescription"
DS_DESCRIPTION_ATTR = "dsDescription"
LIST_SEPARATOR = ", "

FIELD_ALIASES: dict[str, str] = {
    "version": "thzVer",
    "ds_description": DS_DESCRIPTION_ATTR,
}
"""Metadata field names whose attribute is named differently."""

STR_DTYPE = h5py.string_dtype(encoding="utf-8")

_md_regex = re.compile(r"^md(\d+)$")


def md_attr_name(index: int) -> str:
    """Attribute name of the `index`-th (zero based) free-form metadata value."""
    return f"md{index + 1}"


def md_attr_index(name: str) -> int | None:
    """Zero based index of a free-form metadata attribute, or ``None``."""
    match = _md_regex.match(name)
    if match is None:
        return None
    return int(match.group(1)) - 1


def is_reserved_name(name: str) -> bool:
    """Whether `name` is a field or attribute name of the layout itself.

    Free-form metadata keys with such names could not be told apart from
    the fixed attributes when deleted by name.
    """
    return (
        name in FIELD_ATTRS
        or name in FIELD_ATTRS.values()
        or name in FIELD_ALIASES
        or name in USER_FIELDS
        or name in (USER_ATTR, MD_DESCRIPTION_ATTR, DS_DESCRIPTION_ATTR)
        or md_attr_index(name) is not None
    )
