# -*- coding: utf-8 -*-
"""
IO Module - Metadata input and legacy product output.

Reads ESPA internal metadata XML and writes the legacy products: the HDF
container with externally stored bands, per-band GeoTIFFs, and ENVI
headers. Writers are reached through the ``ContainerWriter`` and
``RasterConverter`` interfaces so the conversion layer never touches a
format library directly.

Dependencies
------------
h5py
rasterio

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

# Base classes
from espa_formats.IO.base import ContainerWriter, RasterConverter

# Format writers
from espa_formats.IO.hdf import HDFContainerWriter
from espa_formats.IO.geotiff import GeoTIFFConverter
from espa_formats.IO.envi import format_envi_header, write_envi_header

# Metadata reader
from espa_formats.IO.espa_xml import read_espa_metadata

# Plan replay
from espa_formats.IO.adapters import (
    RasterPlan,
    SDSPlan,
    emit_container,
    emit_rasters,
)

__all__ = [
    'ContainerWriter',
    'RasterConverter',
    'HDFContainerWriter',
    'GeoTIFFConverter',
    'format_envi_header',
    'write_envi_header',
    'read_espa_metadata',
    'RasterPlan',
    'SDSPlan',
    'emit_container',
    'emit_rasters',
]
