# -*- coding: utf-8 -*-
"""
Output Naming - Derive output filenames from a base name and band names.

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
from typing import Union

# Package internal
from espa_formats.exceptions import SizeLimitError

DEFAULT_MAX_LENGTH = 1024


def replace_blanks(name: str) -> str:
    """Replace every blank in *name* with an underscore."""
    return name.replace(' ', '_')


def _check_length(name: str, max_length: int) -> str:
    if len(name) >= max_length:
        raise SizeLimitError(
            f"Output filename is {len(name)} characters, the limit is "
            f"{max_length - 1}: {name}"
        )
    return name


def band_filename(
    base_name: Union[str, Path],
    band_name: str,
    extension: str = 'tif',
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Build ``{base_name}_{band_name}.{extension}`` with blanks replaced.

    Parameters
    ----------
    base_name : str or Path
        Base output name, optionally with a directory.
    band_name : str
        Band name appended to the base.
    extension : str
        File extension without the dot.
    max_length : int
        The full name must be shorter than this.

    Returns
    -------
    str

    Raises
    ------
    SizeLimitError
        If the name reaches *max_length* characters.

    Examples
    --------
    >>> band_filename('scene A', 'band 1')
    'scene_A_band_1.tif'
    """
    name = replace_blanks(f"{base_name}_{band_name}.{extension}")
    return _check_length(name, max_length)


def header_filename(
    container_path: Union[str, Path],
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Return the companion ENVI header name ``<container_path>.hdr``.

    Raises
    ------
    SizeLimitError
        If the name reaches *max_length* characters.
    """
    return _check_length(f"{container_path}.hdr", max_length)
