"""Implements utilities for dotThz files."""

from __future__ import annotations

import logging
import os
import string
from pathlib import Path

log = logging.getLogger(__name__)


def getenv_bool(name: str, default: bool | None = False) -> bool | None:
    """Get environment value as a boolean, returning True for 1, t and true
    (caps-insensitive), and False for any other value and default if undefined.
    """
    val = os.getenv(name)
    if not val:
        return default
    return val.lower() in ("1", "t", "true")


def expand_vars(expr: str, substitute: dict[str, str] | None = None) -> str:
    """Expand (environment) variables.

    Note
    ----
    Malformed variable names and references to non-existing variables are left
    unchanged.

    Parameters
    ----------
    expr
        string expression, which may include (environment) variables prefixed by
        ``$``.
    substitute
        use this dictionary to substitute variables. Takes precedence over
        environment variables.
    """
    if substitute is None:
        substitute = {}

    # use provided mapping
    # then expand env variables
    return os.path.expandvars(string.Template(expr).safe_substitute(substitute))


def expand_path(path: str | Path, substitute: dict[str, str] | None = None) -> str:
    """Expand (environment) variables and ``~`` in a file path.

    Unlike a glob, the path does not need to exist.
    """
    return os.path.expanduser(expand_vars(str(path), substitute))


def normalize_name(name: str) -> str:
    """Strip leading and trailing slashes from a group or dataset name.

    dotThz groups and datasets live one level below their parent, so inner
    slashes are rejected.
    """
    if not isinstance(name, str):
        msg = f"object names must be strings, got {type(name).__name__}"
        raise TypeError(msg)

    stripped = name.strip("/")
    if stripped == "" or "/" in stripped:
        msg = f"'{name}' is not a valid group or dataset name"
        raise ValueError(msg)

    return stripped


# https://stackoverflow.com/a/1094933
def fmtbytes(num, suffix="B"):
    """Returns formatted f-string for printing human-readable number of bytes."""
    for unit in ("", "k", "M", "G", "T", "P", "E", "Z"):
        if abs(num) < 1024.0:
            return f"{num:3.1f} {unit}{suffix}"
        num /= 1024.0
    return f"{num:.1f} Y{suffix}"
