# -*- coding: utf-8 -*-
"""
Scene Metadata - Typed metadata for one ESPA scene and its bands.

Provides ``GlobalMetadata``, ``BandMetadata`` and the ``Metadata``
container that pairs them. Optional fields are ``None`` when absent.
The ``from_dict`` constructors accept raw ESPA values, in which absent
fields are marked with fill sentinels, and translate those sentinels to
``None`` exactly once so that no downstream code compares against magic
numbers.

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
from dataclasses import dataclass, field, fields as dc_fields
from typing import Any, Dict, List, Optional, Sequence, Tuple

# Package internal
from espa_formats.exceptions import ValidationError
from espa_formats.models.common import ClassValue, LatLon
from espa_formats.models.fill import (
    float_or_none,
    int_or_none,
    is_int_fill,
    string_or_none,
)
from espa_formats.vocabulary import DataType


def _pair_or_none(pair: Any) -> Optional[Tuple[float, float]]:
    """Translate a two-element raw pair; absent if either end is fill."""
    if pair is None:
        return None
    if len(pair) != 2:
        raise ValidationError(f"Expected a pair of values, got {pair!r}")
    first, second = float_or_none(pair[0]), float_or_none(pair[1])
    if first is None or second is None:
        return None
    return (first, second)


def _latlon_or_none(pair: Any) -> Optional[LatLon]:
    if isinstance(pair, LatLon):
        return pair
    values = _pair_or_none(pair)
    if values is None:
        return None
    return LatLon(lat=values[0], lon=values[1])


def _counted(items: Optional[Sequence[Any]], count: Any) -> Optional[tuple]:
    """Return the first *count* items, or None when the count is absent.

    The count is absent when it is the integer fill value or not
    positive. Without an explicit count the full sequence is used.
    """
    if items is None:
        return None
    if count is None:
        count = len(items)
    elif is_int_fill(count):
        return None
    count = int(count)
    if count <= 0:
        return None
    if count > len(items):
        raise ValidationError(
            f"Description count {count} exceeds the {len(items)} "
            f"descriptions provided"
        )
    return tuple(items[:count])


@dataclass
class ProjectionInfo:
    """Map projection of the scene grid.

    Only consulted when building the ENVI header for the HDF product.

    Parameters
    ----------
    proj_type : str
        Projection name (``'GEO'``, ``'UTM'``, ``'PS'``, ``'ALBERS'``).
    ul_corner : Tuple[float, float]
        Map ``(x, y)`` of the upper-left corner of the UL pixel.
    pixel_size : Tuple[float, float]
        Pixel size ``(x, y)`` in projection units.
    datum : str, optional
        Datum name (e.g., ``'WGS84'``).
    units : str, optional
        Projection units (``'meters'``, ``'degrees'``).
    utm_zone : int, optional
        UTM zone number; negative for the southern hemisphere.
    """

    proj_type: str
    ul_corner: Tuple[float, float]
    pixel_size: Tuple[float, float]
    datum: Optional[str] = None
    units: Optional[str] = None
    utm_zone: Optional[int] = None


@dataclass
class GlobalMetadata:
    """Scene-level metadata.

    The instrument name selects the calibration layout; any value other
    than ``'TM'``, ``'ETM...'`` or ``'OLI_TIRS'`` simply yields no
    calibration attributes.

    Attributes
    ----------
    data_provider, satellite, instrument : str, optional
        Provenance of the scene.
    acquisition_date : str, optional
        Acquisition date (``YYYY-MM-DD``).
    level1_production_date : str, optional
        Level-1 production timestamp.
    lpgs_metadata_file : str, optional
        Name of the source MTL metadata file.
    solar_zenith, solar_azimuth : float, optional
        Solar angles at scene center (degrees).
    wrs_system, wrs_path, wrs_row : int, optional
        Worldwide Reference System identifiers.
    west_bound, east_bound, north_bound, south_bound : float, optional
        Geographic bounding coordinates (degrees).
    ul_corner, lr_corner : LatLon, optional
        Upper-left and lower-right scene corners.
    projection : ProjectionInfo, optional
        Map projection of the scene grid.
    """

    data_provider: Optional[str] = None
    satellite: Optional[str] = None
    instrument: Optional[str] = None
    acquisition_date: Optional[str] = None
    level1_production_date: Optional[str] = None
    lpgs_metadata_file: Optional[str] = None

    # Solar geometry
    solar_zenith: Optional[float] = None
    solar_azimuth: Optional[float] = None

    # Worldwide Reference System
    wrs_system: Optional[int] = None
    wrs_path: Optional[int] = None
    wrs_row: Optional[int] = None

    # Geolocation
    west_bound: Optional[float] = None
    east_bound: Optional[float] = None
    north_bound: Optional[float] = None
    south_bound: Optional[float] = None
    ul_corner: Optional[LatLon] = None
    lr_corner: Optional[LatLon] = None
    projection: Optional[ProjectionInfo] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'GlobalMetadata':
        """Construct from raw ESPA values, translating fill sentinels.

        Parameters
        ----------
        d : Dict[str, Any]
            Raw values keyed by field name. Unknown keys are rejected.

        Returns
        -------
        GlobalMetadata

        Raises
        ------
        ValidationError
            If *d* contains keys that are not fields.
        """
        _reject_unknown(cls, d)
        projection = d.get('projection')
        if isinstance(projection, dict):
            projection = ProjectionInfo(**projection)
        return cls(
            data_provider=string_or_none(d.get('data_provider')),
            satellite=string_or_none(d.get('satellite')),
            instrument=string_or_none(d.get('instrument')),
            acquisition_date=string_or_none(d.get('acquisition_date')),
            level1_production_date=string_or_none(
                d.get('level1_production_date')),
            lpgs_metadata_file=string_or_none(d.get('lpgs_metadata_file')),
            solar_zenith=float_or_none(d.get('solar_zenith')),
            solar_azimuth=float_or_none(d.get('solar_azimuth')),
            wrs_system=int_or_none(d.get('wrs_system')),
            wrs_path=int_or_none(d.get('wrs_path')),
            wrs_row=int_or_none(d.get('wrs_row')),
            west_bound=float_or_none(d.get('west_bound')),
            east_bound=float_or_none(d.get('east_bound')),
            north_bound=float_or_none(d.get('north_bound')),
            south_bound=float_or_none(d.get('south_bound')),
            ul_corner=_latlon_or_none(d.get('ul_corner')),
            lr_corner=_latlon_or_none(d.get('lr_corner')),
            projection=projection,
        )


@dataclass
class BandMetadata:
    """Metadata for one raw binary band.

    Parameters
    ----------
    name : str
        Band name, unique within a scene (e.g., ``'sr_band1'``).
    file_name : str
        Raw binary file holding the band pixels.
    nlines : int
        Number of lines (rows).
    nsamps : int
        Number of samples (columns).
    data_type : DataType
        Pixel data type.
    fill_value : int, optional
        Pixel fill value.
    long_name : str, optional
        Human-readable band description.
    data_units : str, optional
        Units of the pixel values.
    production_date : str, optional
        Band production timestamp.
    valid_range : Tuple[float, float], optional
        Minimum and maximum valid pixel values.
    saturate_value : int, optional
        Pixel value marking saturation.
    scale_factor : float, optional
        Multiplicative scale applied to pixel values.
    add_offset : float, optional
        Additive offset applied to pixel values.
    calibrated_nt : float, optional
        Calibrated number type value.
    bitmap_description : Tuple[str, ...], optional
        Per-bit descriptions for QA bit-packed bands, bit 0 first.
    class_values : Tuple[ClassValue, ...], optional
        Class legend for classified bands.
    toa_gain, toa_bias : float, optional
        Top-of-atmosphere calibration gain and bias.
    app_version : str, optional
        Version of the application that produced the band.
    """

    name: str
    file_name: str
    nlines: int
    nsamps: int
    data_type: DataType
    fill_value: Optional[int] = None
    long_name: Optional[str] = None
    data_units: Optional[str] = None
    production_date: Optional[str] = None
    valid_range: Optional[Tuple[float, float]] = None
    saturate_value: Optional[int] = None
    scale_factor: Optional[float] = None
    add_offset: Optional[float] = None
    calibrated_nt: Optional[float] = None
    bitmap_description: Optional[Tuple[str, ...]] = None
    class_values: Optional[Tuple[ClassValue, ...]] = None
    toa_gain: Optional[float] = None
    toa_bias: Optional[float] = None
    app_version: Optional[str] = None

    @property
    def dims(self) -> Tuple[int, int]:
        """Band dimensions as ``(nlines, nsamps)``."""
        return (self.nlines, self.nsamps)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'BandMetadata':
        """Construct from raw ESPA values, translating fill sentinels.

        Besides the field names, two count keys are recognized:
        ``nbits`` bounds ``bitmap_description`` and ``nclass`` bounds
        ``class_values``. A count that is the fill value or not
        positive marks the descriptions absent.

        Parameters
        ----------
        d : Dict[str, Any]
            Raw band values.

        Returns
        -------
        BandMetadata

        Raises
        ------
        ValidationError
            If a required key is missing, the data type is unsupported,
            or a description count exceeds the descriptions provided.
        """
        _reject_unknown(cls, d, extra=('nbits', 'nclass'))
        for key in ('name', 'file_name', 'nlines', 'nsamps', 'data_type'):
            if d.get(key) is None:
                raise ValidationError(
                    f"Band metadata is missing required field '{key}'"
                )

        data_type = d['data_type']
        if not isinstance(data_type, DataType):
            try:
                data_type = DataType(str(data_type).upper())
            except ValueError:
                raise ValidationError(
                    f"Unsupported data type {data_type!r} for band "
                    f"{d['name']}"
                ) from None

        classes = d.get('class_values')
        if classes is not None:
            classes = [
                c if isinstance(c, ClassValue) else ClassValue(int(c[0]), str(c[1]))
                for c in classes
            ]

        return cls(
            name=str(d['name']),
            file_name=str(d['file_name']),
            nlines=int(d['nlines']),
            nsamps=int(d['nsamps']),
            data_type=data_type,
            fill_value=int_or_none(d.get('fill_value')),
            long_name=string_or_none(d.get('long_name')),
            data_units=string_or_none(d.get('data_units')),
            production_date=string_or_none(d.get('production_date')),
            valid_range=_pair_or_none(d.get('valid_range')),
            saturate_value=int_or_none(d.get('saturate_value')),
            scale_factor=float_or_none(d.get('scale_factor')),
            add_offset=float_or_none(d.get('add_offset')),
            calibrated_nt=float_or_none(d.get('calibrated_nt')),
            bitmap_description=_counted(
                d.get('bitmap_description'), d.get('nbits')),
            class_values=_counted(classes, d.get('nclass')),
            toa_gain=float_or_none(d.get('toa_gain')),
            toa_bias=float_or_none(d.get('toa_bias')),
            app_version=string_or_none(d.get('app_version')),
        )


@dataclass
class Metadata:
    """Scene metadata plus its ordered bands.

    Parameters
    ----------
    global_metadata : GlobalMetadata
        Scene-level metadata.
    bands : List[BandMetadata]
        Bands in metadata order. Calibration layouts index into this
        order.
    """

    global_metadata: GlobalMetadata
    bands: List[BandMetadata] = field(default_factory=list)

    @property
    def band_names(self) -> List[str]:
        return [b.name for b in self.bands]

    def band(self, name: str) -> Optional[BandMetadata]:
        """Return the first band called *name*, or None."""
        for b in self.bands:
            if b.name == name:
                return b
        return None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'Metadata':
        """Construct from ``{'global': {...}, 'bands': [{...}, ...]}``."""
        return cls(
            global_metadata=GlobalMetadata.from_dict(d.get('global', {})),
            bands=[BandMetadata.from_dict(b) for b in d.get('bands', [])],
        )


def _reject_unknown(cls: type, d: Dict[str, Any],
                    extra: Tuple[str, ...] = ()) -> None:
    known = {f.name for f in dc_fields(cls)} | set(extra)
    unknown = sorted(set(d) - known)
    if unknown:
        raise ValidationError(
            f"Unknown {cls.__name__} fields: {', '.join(unknown)}"
        )
