# -*- coding: utf-8 -*-
"""
GeoTIFF Converter - Translate raw ESPA bands into GeoTIFF.

Opens a raw binary band through its ENVI ``.hdr`` companion and writes a
single-band GeoTIFF plus a ``.tfw`` world file. Uses rasterio (GDAL) as
the backend, so geolocation carried by the ENVI ``map info`` field is
preserved in the GeoTIFF tags.

Dependencies
------------
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

# Standard library
from pathlib import Path
from typing import Optional, Union

try:
    import rasterio
    from rasterio.errors import RasterioError
    _HAS_RASTERIO = True
except ImportError:
    _HAS_RASTERIO = False

# Package internal
from espa_formats.IO.base import RasterConverter
from espa_formats.exceptions import DependencyError, WriteError


class GeoTIFFConverter(RasterConverter):
    """Convert one raw band into a GeoTIFF with a world file.

    Parameters
    ----------
    world_file : bool
        Write a ``.tfw`` world file beside each GeoTIFF. Default True.

    Raises
    ------
    DependencyError
        If rasterio is not installed.

    Examples
    --------
    >>> from espa_formats.IO.geotiff import GeoTIFFConverter
    >>> GeoTIFFConverter().convert('scene_sr_band1.img', -9999,
    ...                            'scene_sr_band1.tif')
    """

    def __init__(self, world_file: bool = True) -> None:
        if not _HAS_RASTERIO:
            raise DependencyError(
                "rasterio is required for GeoTIFF writing. "
                "Install with: pip install rasterio"
            )
        self.world_file = world_file

    def convert(
        self,
        source: Union[str, Path],
        fill: Optional[Union[int, float]],
        destination: Union[str, Path],
    ) -> None:
        """Write ``source`` as a GeoTIFF at ``destination``.

        Parameters
        ----------
        source : str or Path
            Raw band file; its ENVI header must sit beside it.
        fill : int or float, optional
            Nodata value for the output. None keeps whatever nodata the
            source header declares.
        destination : str or Path
            Output GeoTIFF path.

        Raises
        ------
        WriteError
            If the source cannot be read or the GeoTIFF cannot be written.
        """
        try:
            with rasterio.open(str(source)) as src:
                profile = src.meta.copy()
                profile['driver'] = 'GTiff'
                if fill is not None:
                    profile['nodata'] = fill
                if self.world_file:
                    profile['TFW'] = 'YES'
                with rasterio.open(str(destination), 'w', **profile) as dst:
                    dst.write(src.read())
        except (RasterioError, OSError, ValueError) as e:
            raise WriteError("Failed to convert band",
                             target=str(source)) from e
