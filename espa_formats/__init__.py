# -*- coding: utf-8 -*-
"""
ESPA Formats - Convert ESPA raw binary products to legacy formats.

Turns an ESPA scene (internal metadata plus raw binary bands) into the
legacy HDF product, with its ENVI header, or into one GeoTIFF per band.

Dependencies
------------
numpy
h5py
rasterio
PyYAML

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

__version__ = "0.1.0"

from espa_formats.exceptions import (
    ConversionError,
    ValidationError,
    MissingBandError,
    CalibrationError,
    SizeLimitError,
    WriteError,
    DependencyError,
)
from espa_formats.vocabulary import AttributeType, DataType
from espa_formats.models import BandMetadata, GlobalMetadata, Metadata
from espa_formats.config import ConversionConfig, load_config
from espa_formats.convert import (
    convert_to_hdf,
    convert_to_geotiff,
    convert_espa_to_hdf,
    convert_espa_to_gtif,
)

__all__ = [
    'ConversionError',
    'ValidationError',
    'MissingBandError',
    'CalibrationError',
    'SizeLimitError',
    'WriteError',
    'DependencyError',
    'AttributeType',
    'DataType',
    'BandMetadata',
    'GlobalMetadata',
    'Metadata',
    'ConversionConfig',
    'load_config',
    'convert_to_hdf',
    'convert_to_geotiff',
    'convert_espa_to_hdf',
    'convert_espa_to_gtif',
]
