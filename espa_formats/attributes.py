# -*- coding: utf-8 -*-
"""
Attribute Assembly - Decide which attributes a legacy product carries.

Builds the ordered global (scene) attribute list and the per-SDS band
attribute lists for the legacy HDF product, plus the ENVI header fields
that accompany it. Every optional field that is absent in the metadata
is left out; nothing is written as a placeholder. Writers receive the
resulting ``Attribute`` lists and perform no further decisions.

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
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

# Package internal
from espa_formats.calibration import extract_calibration
from espa_formats.config import ConversionConfig
from espa_formats.exceptions import SizeLimitError, ValidationError
from espa_formats.models import BandMetadata, ClassValue, Metadata
from espa_formats.vocabulary import AttributeType

logger = logging.getLogger(__name__)

# Global attribute names
DATA_PROVIDER = "DataProvider"
SATELLITE = "Satellite"
INSTRUMENT = "Instrument"
ACQUISITION_DATE = "AcquisitionDate"
L1_PRODUCTION_DATE = "Level1ProductionDate"
LPGS_METADATA = "LPGSMetadataFile"
SOLAR_ZENITH = "SolarZenith"
SOLAR_AZIMUTH = "SolarAzimuth"
WRS_SYSTEM = "WRS_System"
WRS_PATH = "WRS_Path"
WRS_ROW = "WRS_Row"
REFL_GAINS = "ReflGains"
REFL_BIAS = "ReflBias"
THERMAL_GAINS = "ThermalGains"
THERMAL_BIAS = "ThermalBias"
PAN_GAIN = "PanGain"
PAN_BIAS = "PanBias"
UL_LAT_LONG = "UpperLeftCornerLatLong"
LR_LAT_LONG = "LowerRightCornerLatLong"
WEST_BOUND = "WestBoundingCoordinate"
EAST_BOUND = "EastBoundingCoordinate"
NORTH_BOUND = "NorthBoundingCoordinate"
SOUTH_BOUND = "SouthBoundingCoordinate"
HDF_VERSION = "HDFVersion"
HDFEOS_VERSION = "HDFEOSVersion"
PRODUCTION_DATE = "ProductionDate"

# SDS attribute names
LONG_NAME = "long_name"
UNITS = "units"
VALID_RANGE = "valid_range"
FILL_VALUE = "_FillValue"
SATURATE_VALUE = "_SaturateValue"
SCALE_FACTOR = "scale_factor"
ADD_OFFSET = "add_offset"
CALIBRATED_NT = "calibrated_nt"
BITMAP_DESCRIPTION = "Bitmap description"
CLASS_DESCRIPTION = "Class description"
APP_VERSION = "app_version"

_BITMAP_HEADER = (
    "\n\tBits are numbered from right to left "
    "(bit 0 = LSB, bit N = MSB):\n"
    "\tBit    Description\n"
)
_CLASS_HEADER = "\n\tClass  Description\n"

Number = Union[int, float]


@dataclass(frozen=True)
class Attribute:
    """One named attribute ready to be written.

    Attributes
    ----------
    name : str
        Attribute name.
    value : str or Tuple[Number, ...]
        Text for ``CHAR8`` attributes, otherwise the numeric values.
    type : AttributeType
        Storage type.
    """

    name: str
    value: Union[str, Tuple[Number, ...]]
    type: AttributeType

    @property
    def is_text(self) -> bool:
        return self.type is AttributeType.CHAR8


class _AttributeList:
    """Ordered attribute collector that drops absent values."""

    def __init__(self) -> None:
        self.items: List[Attribute] = []

    def text(self, name: str, value: Optional[str]) -> None:
        if value is not None:
            self.items.append(Attribute(name, value, AttributeType.CHAR8))

    def numbers(self, name: str, values: Optional[Iterable[Number]],
                attr_type: AttributeType) -> None:
        if values is None:
            return
        values = tuple(values)
        if values:
            self.items.append(Attribute(name, values, attr_type))

    def number(self, name: str, value: Optional[Number],
               attr_type: AttributeType) -> None:
        if value is not None:
            self.numbers(name, (value,), attr_type)


def scene_attributes(
    metadata: Metadata,
    hdf_version: Optional[str] = None,
    hdfeos_version: Optional[str] = None,
) -> List[Attribute]:
    """Assemble the global attributes of the legacy product.

    Parameters
    ----------
    metadata : Metadata
        Scene metadata.
    hdf_version : str, optional
        Value for ``HDFVersion``; omitted when None.
    hdfeos_version : str, optional
        Value for ``HDFEOSVersion``; omitted when None.

    Returns
    -------
    List[Attribute]
        Attributes in legacy order. Calibration attributes appear only
        when the instrument has a known layout and band 0 is calibrated.

    Raises
    ------
    CalibrationError
        If band 0 is calibrated but the band list is shorter than the
        instrument layout.
    """
    g = metadata.global_metadata
    attrs = _AttributeList()
    f32, f64, i16 = (AttributeType.FLOAT32, AttributeType.FLOAT64,
                     AttributeType.INT16)

    attrs.text(DATA_PROVIDER, g.data_provider)
    attrs.text(SATELLITE, g.satellite)
    attrs.text(INSTRUMENT, g.instrument)
    attrs.text(ACQUISITION_DATE, g.acquisition_date)
    attrs.text(L1_PRODUCTION_DATE, g.level1_production_date)
    attrs.text(LPGS_METADATA, g.lpgs_metadata_file)
    attrs.number(SOLAR_ZENITH, g.solar_zenith, f32)
    attrs.number(SOLAR_AZIMUTH, g.solar_azimuth, f32)
    attrs.number(WRS_SYSTEM, g.wrs_system, i16)
    attrs.number(WRS_PATH, g.wrs_path, i16)
    attrs.number(WRS_ROW, g.wrs_row, i16)

    cal = extract_calibration(g.instrument, metadata.bands)
    if cal is not None:
        attrs.numbers(REFL_GAINS, cal.reflective_gains, f64)
        attrs.numbers(REFL_BIAS, cal.reflective_biases, f64)
        attrs.numbers(THERMAL_GAINS, cal.thermal_gains, f64)
        attrs.numbers(THERMAL_BIAS, cal.thermal_biases, f64)
        attrs.number(PAN_GAIN, cal.pan_gain, f64)
        attrs.number(PAN_BIAS, cal.pan_bias, f64)

    if g.ul_corner is not None:
        attrs.numbers(UL_LAT_LONG, g.ul_corner.as_tuple(), f64)
    if g.lr_corner is not None:
        attrs.numbers(LR_LAT_LONG, g.lr_corner.as_tuple(), f64)
    attrs.number(WEST_BOUND, g.west_bound, f64)
    attrs.number(EAST_BOUND, g.east_bound, f64)
    attrs.number(NORTH_BOUND, g.north_bound, f64)
    attrs.number(SOUTH_BOUND, g.south_bound, f64)

    attrs.text(HDF_VERSION, hdf_version)
    attrs.text(HDFEOS_VERSION, hdfeos_version)

    # The product's production date is that of its first band
    if metadata.bands:
        attrs.text(PRODUCTION_DATE, metadata.bands[0].production_date)

    return attrs.items


def _build_description(header: str, lines: Iterable[str], attr_name: str,
                       band_name: str, config: ConversionConfig) -> str:
    parts = [header]
    total = len(header)
    for line in lines:
        if len(line) >= config.max_description_line_length:
            raise SizeLimitError(
                f"{attr_name} line for band {band_name} is {len(line)} "
                f"characters, the limit is "
                f"{config.max_description_line_length - 1}"
            )
        total += len(line)
        if total >= config.max_description_length:
            raise SizeLimitError(
                f"{attr_name} for band {band_name} exceeds "
                f"{config.max_description_length - 1} characters"
            )
        parts.append(line)
    return ''.join(parts)


def format_bitmap_description(
    descriptions: Sequence[str],
    band_name: str = '',
    config: Optional[ConversionConfig] = None,
) -> str:
    """Format per-bit descriptions as one text block, bit 0 first.

    Raises
    ------
    SizeLimitError
        If a line or the whole block exceeds its budget.
    """
    config = config or ConversionConfig()
    lines = (f"\t{i}      {text}\n" for i, text in enumerate(descriptions))
    return _build_description(_BITMAP_HEADER, lines, BITMAP_DESCRIPTION,
                              band_name, config)


def format_class_description(
    classes: Sequence[ClassValue],
    band_name: str = '',
    config: Optional[ConversionConfig] = None,
) -> str:
    """Format a class legend as one text block, one class per line.

    Raises
    ------
    SizeLimitError
        If a line or the whole block exceeds its budget.
    """
    config = config or ConversionConfig()
    lines = (f"\t{c.value}      {c.description}\n" for c in classes)
    return _build_description(_CLASS_HEADER, lines, CLASS_DESCRIPTION,
                              band_name, config)


def band_attributes(
    band: BandMetadata,
    config: Optional[ConversionConfig] = None,
) -> List[Attribute]:
    """Assemble the SDS attributes for one band.

    Parameters
    ----------
    band : BandMetadata
        Source band.
    config : ConversionConfig, optional
        Description budgets; defaults apply when None.

    Returns
    -------
    List[Attribute]
        Attributes in legacy order, absent fields omitted.

    Raises
    ------
    SizeLimitError
        If a bitmap or class description exceeds its budget.
    """
    config = config or ConversionConfig()
    attrs = _AttributeList()
    i32 = AttributeType.INT32

    attrs.text(LONG_NAME, band.long_name)
    attrs.text(UNITS, band.data_units)
    if band.valid_range is not None:
        attrs.numbers(VALID_RANGE, (int(v) for v in band.valid_range), i32)
    attrs.number(FILL_VALUE, band.fill_value, i32)
    attrs.number(SATURATE_VALUE, band.saturate_value, i32)
    attrs.number(SCALE_FACTOR, band.scale_factor, AttributeType.FLOAT32)
    attrs.number(ADD_OFFSET, band.add_offset, AttributeType.FLOAT64)
    attrs.number(CALIBRATED_NT, band.calibrated_nt, AttributeType.FLOAT32)

    if band.bitmap_description:
        attrs.text(BITMAP_DESCRIPTION, format_bitmap_description(
            band.bitmap_description, band.name, config))
    if band.class_values:
        attrs.text(CLASS_DESCRIPTION, format_class_description(
            band.class_values, band.name, config))

    attrs.text(APP_VERSION, band.app_version)
    return attrs.items


# ENVI datum names keyed by ESPA datum
_ENVI_DATUMS = {
    'WGS84': 'WGS-84',
    'NAD27': 'North America 1927',
    'NAD83': 'North America 1983',
}


def _map_info(metadata: Metadata) -> Optional[List[Any]]:
    proj = metadata.global_metadata.projection
    if proj is None:
        return None

    datum = _ENVI_DATUMS.get(proj.datum or 'WGS84', proj.datum)
    ulx, uly = proj.ul_corner
    px, py = proj.pixel_size
    proj_type = proj.proj_type.upper()
    if proj_type == 'UTM':
        if proj.utm_zone is None:
            raise ValidationError("UTM projection is missing its zone")
        hemisphere = 'North' if proj.utm_zone >= 0 else 'South'
        return ['UTM', 1.0, 1.0, ulx, uly, px, py, abs(proj.utm_zone),
                hemisphere, datum, 'units=Meters']
    if proj_type == 'GEO':
        return ['Geographic Lat/Lon', 1.0, 1.0, ulx, uly, px, py, datum,
                'units=Degrees']
    logger.warning("No ENVI map info form for projection %s; omitting it",
                   proj.proj_type)
    return None


def envi_header_fields(
    metadata: Metadata,
    band: BandMetadata,
    config: Optional[ConversionConfig] = None,
) -> Dict[str, Any]:
    """Assemble ENVI header fields describing the legacy HDF product.

    Parameters
    ----------
    metadata : Metadata
        Scene metadata (projection and band count).
    band : BandMetadata
        Band whose geometry the header describes.
    config : ConversionConfig, optional
        Band budget; defaults apply when None.

    Returns
    -------
    Dict[str, Any]
        Header fields in write order.

    Raises
    ------
    SizeLimitError
        If the scene has more bands than an ENVI header may list.
    ValidationError
        If a UTM projection has no zone.
    """
    config = config or ConversionConfig()
    if len(metadata.bands) > config.max_envi_bands:
        raise SizeLimitError(
            f"Number of bands ({len(metadata.bands)}) exceeds the ENVI "
            f"header maximum of {config.max_envi_bands}"
        )

    fields: Dict[str, Any] = {
        'description': 'ESPA-generated file',
        'samples': band.nsamps,
        'lines': band.nlines,
        'bands': 1,
        'header offset': 0,
        'file type': 'HDF scientific data',
        'data type': band.data_type.envi_code,
        'interleave': 'bsq',
        'byte order': 0,
    }
    if band.fill_value is not None:
        fields['data ignore value'] = band.fill_value
    map_info = _map_info(metadata)
    if map_info is not None:
        fields['map info'] = map_info
    fields['band names'] = [band.name]
    return fields
