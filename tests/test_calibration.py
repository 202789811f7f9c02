# -*- coding: utf-8 -*-
"""
Calibration Tests - Instrument classification and gain/bias vectors.

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
from espa_formats.calibration import (
    InstrumentClass,
    classify_instrument,
    extract_calibration,
)
from espa_formats.exceptions import CalibrationError
from espa_formats.models import FLOAT_META_FILL

from conftest import make_band


def _calibrated_bands(count):
    """Bands whose gain is 1.0 + index and bias is -index."""
    return [
        make_band(f'toa_band{i + 1}', toa_gain=1.0 + i, toa_bias=-float(i))
        for i in range(count)
    ]


class TestClassifyInstrument:

    @pytest.mark.parametrize('name,expected', [
        ('TM', InstrumentClass.TM),
        ('ETM', InstrumentClass.ETM),
        ('ETM+', InstrumentClass.ETM),
        ('OLI_TIRS', InstrumentClass.OLI_TIRS),
        ('OLI', InstrumentClass.UNSUPPORTED),
        ('MSS', InstrumentClass.UNSUPPORTED),
        ('tm', InstrumentClass.UNSUPPORTED),
        (None, InstrumentClass.UNSUPPORTED),
    ])
    def test_classification(self, name, expected):
        assert classify_instrument(name) is expected

    def test_layouts(self):
        assert InstrumentClass.TM.layout.reflective == (0, 1, 2, 3, 4, 6)
        assert InstrumentClass.ETM.layout.reflective == (0, 1, 2, 3, 4, 7)
        assert InstrumentClass.OLI_TIRS.layout.reflective == (
            0, 1, 2, 3, 4, 5, 6, 8)
        assert InstrumentClass.UNSUPPORTED.layout is None


class TestExtractCalibration:

    def test_tm(self):
        cal = extract_calibration('TM', _calibrated_bands(7))
        assert cal.reflective_gains == (1.0, 2.0, 3.0, 4.0, 5.0, 7.0)
        assert cal.reflective_biases == (0.0, -1.0, -2.0, -3.0, -4.0, -6.0)
        assert cal.thermal_gains == (6.0,)
        assert cal.thermal_biases == (-5.0,)
        assert cal.pan_gain is None
        assert cal.pan_bias is None

    def test_etm_pan_outside_band_count(self):
        cal = extract_calibration('ETM+', _calibrated_bands(9))
        assert cal.reflective_gains == (1.0, 2.0, 3.0, 4.0, 5.0, 8.0)
        assert cal.thermal_gains == (6.0, 7.0)
        assert cal.pan_gain == 9.0
        assert cal.pan_bias == -8.0

    def test_oli_tirs(self):
        cal = extract_calibration('OLI_TIRS', _calibrated_bands(11))
        assert len(cal.reflective_gains) == 8
        assert cal.thermal_gains == (10.0, 11.0)
        assert cal.pan_gain == 8.0
        assert 8.0 not in cal.reflective_gains

    def test_unsupported_instrument(self):
        assert extract_calibration('MSS', _calibrated_bands(7)) is None

    @pytest.mark.parametrize('instrument,count', [
        ('TM', 7), ('ETM+', 9), ('OLI_TIRS', 11),
    ])
    @pytest.mark.parametrize('field', ['toa_gain', 'toa_bias'])
    def test_band_zero_uncalibrated(self, instrument, count, field):
        bands = _calibrated_bands(count)
        setattr(bands[0], field, None)
        assert extract_calibration(instrument, bands) is None

    def test_no_bands(self):
        assert extract_calibration('TM', []) is None

    def test_missing_layout_band(self):
        with pytest.raises(CalibrationError, match='index 6'):
            extract_calibration('TM', _calibrated_bands(6))

    def test_uncalibrated_layout_band(self):
        bands = _calibrated_bands(7)
        bands[3].toa_gain = None
        cal = extract_calibration('TM', bands)
        assert cal.reflective_gains == (
            1.0, 2.0, 3.0, FLOAT_META_FILL, 5.0, 7.0)
        assert cal.reflective_biases[3] == -3.0

    def test_oli_tirs_without_thermal_calibration(self):
        bands = _calibrated_bands(11)
        for band in bands[9:]:
            band.toa_gain = None
            band.toa_bias = None
        cal = extract_calibration('OLI_TIRS', bands)
        assert cal.thermal_gains == (FLOAT_META_FILL, FLOAT_META_FILL)
        assert cal.thermal_biases == (FLOAT_META_FILL, FLOAT_META_FILL)
        assert len(cal.reflective_gains) == 8
        assert cal.pan_gain == 8.0
