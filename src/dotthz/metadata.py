"""Implements the metadata record attached to each dotThz measurement group."""

from __future__ import annotations

import copy as _copy
import dataclasses
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class DotthzMetaData:
    """Metadata associated with a dotThz measurement.

    Every field is always present. Fields missing from a file are read back as
    empty strings or empty collections.

    Examples
    --------
    >>> from dotthz import DotthzMetaData
    >>> meta = DotthzMetaData(
    ...     user="John Doe",
    ...     md={"Thickness (mm)": "0.52"},
    ...     ds_description=["Sample", "Reference"],
    ... )
    >>> meta.md["Thickness (mm)"]
    '0.52'
    """

    user: str = ""
    """The user responsible for the measurement."""
    email: str = ""
    """The email of the user."""
    orcid: str = ""
    """The ORCID identifier of the user."""
    institution: str = ""
    """The institution of the user."""
    description: str = ""
    """The description of the measurement."""
    md: OrderedDict[str, str] = field(default_factory=OrderedDict)
    """Additional metadata as ordered key-value pairs."""
    ds_description: list[str] = field(default_factory=list)
    """Descriptions of the datasets, one per dataset."""
    version: str = ""
    """dotThz format version."""
    mode: str = ""
    """The mode of measurement."""
    instrument: str = ""
    """The instrument used for the measurement."""
    time: str = ""
    """The time of measurement."""
    date: str = ""
    """The date of measurement."""

    def __post_init__(self) -> None:
        if not isinstance(self.md, OrderedDict):
            self.md = OrderedDict(self.md)
        if not isinstance(self.ds_description, list):
            self.ds_description = list(self.ds_description)

    def to_dict(self) -> dict[str, Any]:
        """Convert the record to a plain dictionary.

        The free-form `md` map becomes a regular (insertion ordered) ``dict``,
        suitable for JSON or YAML serialization.
        """
        d = dataclasses.asdict(self)
        d["md"] = dict(self.md)
        return d

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> DotthzMetaData:
        """Build a record from a dictionary as returned by :meth:`to_dict`.

        Absent keys get their default value.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = [k for k in mapping if k not in known]
        if len(unknown) > 0:
            msg = f"unknown metadata fields {unknown}"
            raise ValueError(msg)

        return cls(**mapping)

    def copy(self) -> DotthzMetaData:
        """Return a deep copy of this record."""
        return _copy.deepcopy(self)
