# -*- coding: utf-8 -*-
"""
Common Types - Small geospatial primitives reused across metadata models.

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
from dataclasses import dataclass
from typing import Tuple


@dataclass
class LatLon:
    """WGS-84 geographic point (2D).

    Parameters
    ----------
    lat : float
        Latitude in degrees.
    lon : float
        Longitude in degrees.
    """

    lat: float = 0.0
    lon: float = 0.0

    def as_tuple(self) -> Tuple[float, float]:
        """Return ``(lat, lon)``."""
        return (self.lat, self.lon)


@dataclass
class ClassValue:
    """One entry of a band's class-value legend.

    Parameters
    ----------
    value : int
        Pixel code.
    description : str
        Meaning of the code.
    """

    value: int
    description: str
