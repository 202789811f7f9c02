# -*- coding: utf-8 -*-
"""
Conversions - ESPA raw binary products to legacy formats.

Public entry points that turn an ESPA scene into either the legacy HDF
container (plus its ENVI header) or one GeoTIFF per band. Each
conversion first builds a complete plan (band remap, attribute lists,
output names) so validation failures happen before anything is written,
then replays the plan through a writer.

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

# Standard library
import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

# Package internal
from espa_formats.IO.adapters import (
    RasterPlan,
    SDSPlan,
    emit_container,
    emit_rasters,
)
from espa_formats.IO.base import ContainerWriter, RasterConverter
from espa_formats.IO.envi import write_envi_header
from espa_formats.IO.geotiff import GeoTIFFConverter
from espa_formats.IO.hdf import HDFContainerWriter
from espa_formats.IO.espa_xml import read_espa_metadata
from espa_formats.attributes import (
    band_attributes,
    envi_header_fields,
    scene_attributes,
)
from espa_formats.config import ConversionConfig, load_config
from espa_formats.exceptions import ValidationError
from espa_formats.models import Metadata
from espa_formats.naming import band_filename, header_filename
from espa_formats.remap import RemappedBand, remap_bands

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
WriterFactory = Callable[[PathLike], ContainerWriter]


def _require_single_resolution(remapped: List[RemappedBand]) -> None:
    dims = {r.band.dims for r in remapped if r.present}
    if len(dims) > 1:
        detail = ", ".join(
            f"{r.band.name}={r.band.nlines}x{r.band.nsamps}"
            for r in remapped if r.present
        )
        raise ValidationError(
            "Multi-resolution products are not supported for HDF output "
            f"({detail})"
        )


def _remove_partial(*paths: Path) -> None:
    for path in paths:
        if path.exists():
            logger.warning("Removing partial output %s", path)
            path.unlink()


def convert_to_hdf(
    metadata: Metadata,
    hdf_file: PathLike,
    config: Optional[ConversionConfig] = None,
    writer_factory: Optional[WriterFactory] = None,
) -> Path:
    """Write the legacy HDF container and its ENVI header.

    Bands are remapped onto the legacy SDS layout, each SDS points at its
    band's raw file, and ``<hdf_file>.hdr`` describes the container using
    the geometry of ``sr_band1``.

    Parameters
    ----------
    metadata : Metadata
        Scene metadata.
    hdf_file : str or Path
        Output container path.
    config : ConversionConfig, optional
        Limits and version strings. Loaded from the packaged defaults
        when None.
    writer_factory : callable, optional
        Called with the container path to get a ``ContainerWriter``.
        Defaults to ``HDFContainerWriter``.

    Returns
    -------
    Path
        The container path.

    Raises
    ------
    MissingBandError
        If a required legacy band is absent.
    ValidationError
        If the remapped bands differ in size.
    CalibrationError
        If the band list is shorter than the calibration layout.
    SizeLimitError
        If a description, the header path, or the band count exceeds
        its budget.
    WriteError
        If the container or header cannot be written. Partial outputs
        are removed before the error propagates.
    """
    config = config or load_config()
    writer_factory = writer_factory or HDFContainerWriter
    hdf_path = Path(hdf_file)

    remapped = remap_bands(metadata.bands)
    _require_single_resolution(remapped)

    plans = [
        SDSPlan(
            name=r.slot.legacy_name,
            source_name=r.band.name,
            data_type=r.band.data_type,
            dims=r.band.dims,
            external_file=r.band.file_name,
            attributes=band_attributes(r.band, config),
        )
        for r in remapped if r.present
    ]
    header_path = Path(header_filename(str(hdf_path),
                                       config.max_filename_length))
    # Slot 0 holds sr_band1, which describes the whole container
    envi_fields = envi_header_fields(metadata, remapped[0].band, config)

    logger.info("Converting %d bands to %s", len(plans), hdf_path)
    writer = writer_factory(hdf_path)
    try:
        with writer:
            hdf_version = config.hdf_version or writer.library_version
            scene_attrs = scene_attributes(
                metadata, hdf_version, config.hdfeos_version)
            emit_container(writer, scene_attrs, plans)
        write_envi_header(header_path, envi_fields)
    except Exception:
        _remove_partial(hdf_path, header_path)
        raise
    return hdf_path


def convert_to_geotiff(
    metadata: Metadata,
    base_name: str,
    config: Optional[ConversionConfig] = None,
    converter: Optional[RasterConverter] = None,
) -> List[Path]:
    """Write one GeoTIFF (with world file) per band.

    Output names are ``{base_name}_{band name}.tif`` with blanks replaced
    by underscores. Bands are converted in metadata order and the first
    failure stops the run; every GeoTIFF and world file of the run is
    then removed.

    Parameters
    ----------
    metadata : Metadata
        Scene metadata.
    base_name : str
        Prefix of every output file, optionally including a directory.
    config : ConversionConfig, optional
        Filename budget and extension. Loaded from the packaged defaults
        when None.
    converter : RasterConverter, optional
        Defaults to ``GeoTIFFConverter``.

    Returns
    -------
    List[Path]
        GeoTIFF paths in band order.

    Raises
    ------
    SizeLimitError
        If an output name exceeds the filename budget.
    WriteError
        If a band cannot be converted. Outputs of the run are removed
        before the error propagates.
    """
    config = config or load_config()

    plans = [
        RasterPlan(
            source=band.file_name,
            fill=band.fill_value,
            destination=band_filename(
                base_name, band.name,
                extension=config.geotiff_extension,
                max_length=config.max_filename_length,
            ),
        )
        for band in metadata.bands
    ]

    converter = converter or GeoTIFFConverter()
    try:
        emit_rasters(converter, plans)
    except Exception:
        for plan in plans:
            destination = Path(plan.destination)
            _remove_partial(destination, destination.with_suffix(".tfw"))
        raise
    return [Path(p.destination) for p in plans]


def convert_espa_to_hdf(
    xml_file: PathLike,
    hdf_file: PathLike,
    config: Optional[ConversionConfig] = None,
) -> Path:
    """Read ESPA metadata XML and write the legacy HDF product."""
    metadata = read_espa_metadata(xml_file)
    return convert_to_hdf(metadata, hdf_file, config=config)


def convert_espa_to_gtif(
    xml_file: PathLike,
    base_name: str,
    config: Optional[ConversionConfig] = None,
) -> List[Path]:
    """Read ESPA metadata XML and write per-band GeoTIFFs."""
    metadata = read_espa_metadata(xml_file)
    return convert_to_geotiff(metadata, base_name, config=config)
