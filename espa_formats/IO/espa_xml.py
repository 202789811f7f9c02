# -*- coding: utf-8 -*-
"""
ESPA Metadata Reader - Parse ESPA internal metadata XML.

Reads the ``espa_metadata`` XML document that accompanies a raw binary
ESPA product and builds the ``Metadata`` model from it. Only the fields
used by the legacy conversions are extracted; schema validation is not
performed. Values are handed to ``Metadata.from_dict`` raw, so fill
sentinels in the XML become absent fields there.

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
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

# Package internal
from espa_formats.exceptions import ValidationError
from espa_formats.models import Metadata

logger = logging.getLogger(__name__)

# <band> XML attribute -> BandMetadata field
_BAND_ATTRS = (
    'name', 'data_type', 'nlines', 'nsamps', 'fill_value',
    'saturate_value', 'scale_factor', 'add_offset', 'calibrated_nt',
)

# <band> child element -> BandMetadata field
_BAND_TEXT = (
    'long_name', 'file_name', 'data_units', 'app_version',
    'production_date',
)

_GLOBAL_TEXT = (
    'data_provider', 'satellite', 'instrument', 'acquisition_date',
    'level1_production_date', 'lpgs_metadata_file',
)


class _Finder:
    """Namespace-agnostic element lookup."""

    def __init__(self, root: ET.Element) -> None:
        self.ns = ''
        if root.tag.startswith('{'):
            self.ns = root.tag.split('}')[0] + '}'

    def find(self, elem: ET.Element, path: str) -> Optional[ET.Element]:
        return elem.find('/'.join(self.ns + p for p in path.split('/')))

    def findall(self, elem: ET.Element, path: str) -> List[ET.Element]:
        return elem.findall('/'.join(self.ns + p for p in path.split('/')))

    def text(self, elem: ET.Element, path: str) -> Optional[str]:
        child = self.find(elem, path)
        if child is None or child.text is None:
            return None
        return child.text.strip()


def _float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        raise ValidationError(f"Expected a number, got {value!r}") from None


def _corner(f: _Finder, parent: ET.Element, tag: str,
            location: str, xkey: str, ykey: str) -> Optional[List[float]]:
    for elem in f.findall(parent, tag):
        if elem.get('location') == location:
            return [_float(elem.get(xkey)), _float(elem.get(ykey))]
    return None


def _parse_projection(f: _Finder, gm: ET.Element,
                      first_band: Optional[ET.Element]) -> Optional[Dict[str, Any]]:
    proj = f.find(gm, 'projection_information')
    if proj is None:
        return None
    ul = _corner(f, proj, 'corner_point', 'UL', 'x', 'y')
    if ul is None:
        logger.warning("Projection has no UL corner point; ignoring it")
        return None

    pixel_size = None
    if first_band is not None:
        px = f.find(first_band, 'pixel_size')
        if px is not None:
            pixel_size = (_float(px.get('x')), _float(px.get('y')))
    if pixel_size is None:
        logger.warning("First band has no pixel size; ignoring projection")
        return None

    zone = f.text(proj, 'utm_proj_params/zone_code')
    return {
        'proj_type': proj.get('projection', ''),
        'ul_corner': tuple(ul),
        'pixel_size': pixel_size,
        'datum': proj.get('datum'),
        'units': proj.get('units'),
        'utm_zone': int(zone) if zone is not None else None,
    }


def _parse_global(f: _Finder, gm: ET.Element,
                  first_band: Optional[ET.Element]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for tag in _GLOBAL_TEXT:
        result[tag] = f.text(gm, tag)

    solar = f.find(gm, 'solar_angles')
    if solar is not None:
        result['solar_zenith'] = _float(solar.get('zenith'))
        result['solar_azimuth'] = _float(solar.get('azimuth'))

    wrs = f.find(gm, 'wrs')
    if wrs is not None:
        for key in ('system', 'path', 'row'):
            value = wrs.get(key)
            result[f'wrs_{key}'] = int(value) if value is not None else None

    result['ul_corner'] = _corner(f, gm, 'corner', 'UL',
                                  'latitude', 'longitude')
    result['lr_corner'] = _corner(f, gm, 'corner', 'LR',
                                  'latitude', 'longitude')

    bounds = f.find(gm, 'bounding_coordinates')
    if bounds is not None:
        for side in ('west', 'east', 'north', 'south'):
            result[f'{side}_bound'] = _float(f.text(bounds, side))

    result['projection'] = _parse_projection(f, gm, first_band)
    return result


def _parse_band(f: _Finder, band: ET.Element) -> Dict[str, Any]:
    result: Dict[str, Any] = {key: band.get(key) for key in _BAND_ATTRS}
    for tag in _BAND_TEXT:
        result[tag] = f.text(band, tag)

    vr = f.find(band, 'valid_range')
    if vr is not None:
        result['valid_range'] = (_float(vr.get('min')), _float(vr.get('max')))

    toa = f.find(band, 'toa_reflectance')
    if toa is not None:
        result['toa_gain'] = _float(toa.get('gain'))
        result['toa_bias'] = _float(toa.get('bias'))

    bitmap = f.find(band, 'bitmap_description')
    if bitmap is not None:
        bits = sorted(f.findall(bitmap, 'bit'),
                      key=lambda b: int(b.get('num', 0)))
        result['bitmap_description'] = [(b.text or '').strip() for b in bits]

    classes = f.find(band, 'class_values')
    if classes is not None:
        result['class_values'] = [
            (int(c.get('num', 0)), (c.text or '').strip())
            for c in f.findall(classes, 'class')
        ]
    return result


def read_espa_metadata(path: Union[str, Path]) -> Metadata:
    """Read an ESPA internal metadata XML file.

    Parameters
    ----------
    path : str or Path
        Path to the ``*.xml`` metadata file.

    Returns
    -------
    Metadata
        Scene metadata with bands in document order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValidationError
        If the document is not well-formed ESPA metadata.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Metadata file not found: {path}")

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ValidationError(f"Failed to parse {path}: {e}") from e

    f = _Finder(root)
    gm = f.find(root, 'global_metadata')
    if gm is None:
        raise ValidationError(f"{path} has no global_metadata element")
    band_elems = f.findall(root, 'bands/band')
    first_band = band_elems[0] if band_elems else None

    raw = {
        'global': _parse_global(f, gm, first_band),
        'bands': [_parse_band(f, b) for b in band_elems],
    }
    logger.debug("Read %d bands from %s", len(band_elems), path)
    return Metadata.from_dict(raw)
