# -*- coding: utf-8 -*-
"""
Shared fixtures - Scene builders for conversion tests.

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

import pytest

from espa_formats.models import BandMetadata, GlobalMetadata, LatLon, Metadata
from espa_formats.remap import LEGACY_SLOTS
from espa_formats.vocabulary import DataType


def make_band(name, nlines=4, nsamps=6, **kwargs):
    """Band with the required fields filled in."""
    values = dict(
        name=name,
        file_name=f"scene_{name}.img",
        nlines=nlines,
        nsamps=nsamps,
        data_type=DataType.INT16,
    )
    values.update(kwargs)
    return BandMetadata(**values)


def make_scene(instrument='TM', include_fmask=True, **global_kwargs):
    """Scene holding every legacy band, sr_band1 first."""
    names = [s.modern_name for s in LEGACY_SLOTS]
    if not include_fmask:
        names.remove('fmask')
    bands = [
        make_band(n, fill_value=-9999, production_date='2014-01-01T00:00:00Z')
        for n in names
    ]
    gm = GlobalMetadata(
        data_provider='USGS/EROS',
        satellite='LANDSAT_5',
        instrument=instrument,
        acquisition_date='1987-04-02',
        solar_zenith=39.5,
        solar_azimuth=133.25,
        wrs_system=2,
        wrs_path=46,
        wrs_row=28,
        ul_corner=LatLon(47.5, -123.5),
        lr_corner=LatLon(45.5, -120.5),
        **global_kwargs,
    )
    return Metadata(global_metadata=gm, bands=bands)


@pytest.fixture
def scene():
    return make_scene()
