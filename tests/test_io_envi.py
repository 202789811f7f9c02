# -*- coding: utf-8 -*-
"""
ENVI Header Tests - Text formatting of header fields.

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

# Third-party
import pytest

# Package internal
from espa_formats.IO.envi import format_envi_header, write_envi_header
from espa_formats.exceptions import WriteError


def test_format():
    text = format_envi_header({
        'description': 'ESPA-generated file',
        'samples': 8091,
        'file type': 'HDF scientific data',
        'interleave': 'bsq',
        'map info': ['UTM', 1.0, 1.0, 399915.0, 5266815.0, 30.0, 30.0, 10,
                     'North', 'WGS-84', 'units=Meters'],
        'band names': ['sr_band1'],
    })
    assert text.splitlines() == [
        'ENVI',
        'description = { ESPA-generated file }',
        'samples = 8091',
        'file type = { HDF scientific data }',
        'interleave = bsq',
        'map info = { UTM, 1.0, 1.0, 399915.0, 5266815.0, 30.0, 30.0, 10, '
        'North, WGS-84, units=Meters }',
        'band names = { sr_band1 }',
    ]
    assert text.endswith('\n')


def test_write(tmp_path):
    path = write_envi_header(tmp_path / "scene.hdf.hdr", {'bands': 1})
    assert path.read_text() == "ENVI\nbands = 1\n"


def test_write_failure(tmp_path):
    with pytest.raises(WriteError):
        write_envi_header(tmp_path / "missing" / "scene.hdr", {'bands': 1})


def test_free_text_always_braced():
    text = format_envi_header({'description': 'scene', 'sensor type': 'TM'})
    assert text.splitlines()[1:] == [
        'description = { scene }',
        'sensor type = TM',
    ]


def test_float_precision():
    text = format_envi_header({'map info': [0.000269494585236]})
    assert 'map info = { 0.000269494585236 }' in text
