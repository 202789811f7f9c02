# -*- coding: utf-8 -*-
"""
Models - Typed metadata containers for ESPA scenes.

Re-exports all metadata classes from submodules for convenient access:

    from espa_formats.models import Metadata, GlobalMetadata, BandMetadata

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

# Common primitives
from espa_formats.models.common import ClassValue, LatLon

# Fill sentinels
from espa_formats.models.fill import (
    EPSILON,
    FLOAT_META_FILL,
    INT_META_FILL,
    STRING_META_FILL,
    is_float_fill,
    is_int_fill,
    is_string_fill,
)

# Scene
from espa_formats.models.scene import (
    BandMetadata,
    GlobalMetadata,
    Metadata,
    ProjectionInfo,
)

__all__ = [
    # Common
    'ClassValue',
    'LatLon',
    # Fill
    'EPSILON',
    'FLOAT_META_FILL',
    'INT_META_FILL',
    'STRING_META_FILL',
    'is_float_fill',
    'is_int_fill',
    'is_string_fill',
    # Scene
    'BandMetadata',
    'GlobalMetadata',
    'Metadata',
    'ProjectionInfo',
]
