# -*- coding: utf-8 -*-
"""
ENVI Header Writer - Textual ``.hdr`` companion files.

Serializes an ordered mapping of header fields into the ENVI text
format: an ``ENVI`` magic line followed by one ``key = value`` line per
field. Lists become brace-delimited, comma-separated groups, and the
free-text fields (``description``, ``file type``) are always braced.

Author
------
geoint.org

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
from pathlib import Path
from typing import Any, Mapping, Union

# Package internal
from espa_formats.exceptions import WriteError

# Free-text fields ENVI reads only when brace-delimited
BRACED_TEXT_FIELDS = frozenset({'description', 'file type'})


def _scalar(value: Any) -> str:
    # Full precision for map coordinates and pixel sizes
    return repr(value) if isinstance(value, float) else str(value)


def _header_line(key: str, value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return f"{key} = {{ {', '.join(_scalar(v) for v in value)} }}"
    if key in BRACED_TEXT_FIELDS:
        return f"{key} = {{ {value} }}"
    return f"{key} = {_scalar(value)}"


def format_envi_header(fields: Mapping[str, Any]) -> str:
    """Render header fields as ENVI header text, in mapping order."""
    return "ENVI\n" + "".join(
        _header_line(key, value) + "\n" for key, value in fields.items())


def write_envi_header(path: Union[str, Path],
                      fields: Mapping[str, Any]) -> Path:
    """Write an ENVI header file.

    Parameters
    ----------
    path : str or Path
        Header path, conventionally ending in ``.hdr``.
    fields : Mapping[str, Any]
        Header fields in write order.

    Returns
    -------
    Path
        The written header path.

    Raises
    ------
    WriteError
        If the file cannot be written.
    """
    path = Path(path)
    try:
        path.write_text(format_envi_header(fields), encoding="utf-8")
    except OSError as e:
        raise WriteError("Failed to write ENVI header",
                         target=str(path)) from e
    return path
