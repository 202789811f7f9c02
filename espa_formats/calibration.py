# -*- coding: utf-8 -*-
"""
Calibration - Instrument-specific TOA gain/bias extraction.

Each Landsat sensor generation stores its reflective, thermal, and
panchromatic bands at fixed positions in the metadata band list. The
layouts are a closed set of three, kept here as plain data so each can be
checked against the sensor documentation on its own:

- TM (Landsat 4-5): bands 1-7, band 6 thermal, no pan.
- ETM+ (Landsat 7): bands 1-8 classified, bands 61 and 62 thermal, pan
  (band 8) read from index 8.
- OLI_TIRS (Landsat 8): bands 1-11, bands 10 and 11 thermal, band 8 pan.

Calibration is written only when band 0 carries both a gain and a bias;
otherwise the scene has no calibration at all. A later layout band without
a gain or bias keeps its position in the vectors and carries the float
metadata fill value.

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
from enum import Enum
from typing import List, Optional, Sequence, Tuple

# Package internal
from espa_formats.exceptions import CalibrationError
from espa_formats.models import FLOAT_META_FILL, BandMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalibrationLayout:
    """Band positions for one instrument's calibration vectors.

    Parameters
    ----------
    band_count : int
        Number of leading bands classified as reflective or thermal.
    thermal : Tuple[int, ...]
        Zero-based indices of the thermal bands.
    panchromatic : int, optional
        Zero-based index of the pan band. It is never reflective, and
        may lie outside ``band_count``.
    """

    band_count: int
    thermal: Tuple[int, ...]
    panchromatic: Optional[int] = None

    @property
    def reflective(self) -> Tuple[int, ...]:
        """Indices of the reflective bands, in band order."""
        return tuple(
            i for i in range(self.band_count)
            if i not in self.thermal and i != self.panchromatic
        )


class InstrumentClass(Enum):
    """Instrument generations with a known calibration layout."""

    TM = CalibrationLayout(band_count=7, thermal=(5,))
    ETM = CalibrationLayout(band_count=8, thermal=(5, 6), panchromatic=8)
    OLI_TIRS = CalibrationLayout(band_count=11, thermal=(9, 10),
                                 panchromatic=7)
    UNSUPPORTED = None

    @property
    def layout(self) -> Optional[CalibrationLayout]:
        return self.value


def classify_instrument(instrument: Optional[str]) -> InstrumentClass:
    """Map an instrument name to its calibration class.

    ``'TM'`` and ``'OLI_TIRS'`` match exactly; any name starting with
    ``'ETM'`` (``'ETM'``, ``'ETM+'``) is ETM+. Everything else,
    including None, is ``UNSUPPORTED``.
    """
    if instrument == 'TM':
        return InstrumentClass.TM
    if instrument is not None and instrument.startswith('ETM'):
        return InstrumentClass.ETM
    if instrument == 'OLI_TIRS':
        return InstrumentClass.OLI_TIRS
    return InstrumentClass.UNSUPPORTED


@dataclass(frozen=True)
class CalibrationVectors:
    """Scene calibration split by band category.

    Attributes
    ----------
    reflective_gains, reflective_biases : Tuple[float, ...]
        Gains/biases of the reflective bands, in band order.
    thermal_gains, thermal_biases : Tuple[float, ...]
        Gains/biases of the one or two thermal bands.
    pan_gain, pan_bias : float, optional
        Pan band gain/bias; None for instruments without a pan band.
    """

    reflective_gains: Tuple[float, ...]
    reflective_biases: Tuple[float, ...]
    thermal_gains: Tuple[float, ...]
    thermal_biases: Tuple[float, ...]
    pan_gain: Optional[float] = None
    pan_bias: Optional[float] = None


def _gain_bias(bands: Sequence[BandMetadata], index: int,
               instrument: str) -> Tuple[float, float]:
    if index >= len(bands):
        raise CalibrationError(
            f"{instrument} calibration expects band index {index}, but the "
            f"metadata only has {len(bands)} bands"
        )
    band = bands[index]
    if band.toa_gain is None or band.toa_bias is None:
        logger.warning("%s band index %d (%s) has no gain/bias; writing "
                       "fill in its place", instrument, index, band.name)
    gain = FLOAT_META_FILL if band.toa_gain is None else band.toa_gain
    bias = FLOAT_META_FILL if band.toa_bias is None else band.toa_bias
    return gain, bias


def extract_calibration(
    instrument: Optional[str],
    bands: Sequence[BandMetadata],
) -> Optional[CalibrationVectors]:
    """Build the reflective/thermal/pan calibration vectors for a scene.

    Parameters
    ----------
    instrument : str, optional
        Instrument name from the scene metadata.
    bands : Sequence[BandMetadata]
        All bands, in metadata order.

    Returns
    -------
    CalibrationVectors or None
        None when the instrument has no known layout or band 0 lacks a
        gain or bias.

    Raises
    ------
    CalibrationError
        If band 0 is calibrated but the band list is shorter than the
        layout needs.

    Examples
    --------
    >>> vectors = extract_calibration('TM', metadata.bands)
    >>> len(vectors.reflective_gains), len(vectors.thermal_gains)
    (6, 1)
    """
    inst_class = classify_instrument(instrument)
    layout = inst_class.layout
    if layout is None:
        logger.debug("No calibration layout for instrument %r", instrument)
        return None

    if not bands or bands[0].toa_gain is None or bands[0].toa_bias is None:
        logger.debug("Band 0 has no gain/bias; skipping calibration")
        return None

    refl: List[Tuple[float, float]] = [
        _gain_bias(bands, i, inst_class.name) for i in layout.reflective
    ]
    thermal: List[Tuple[float, float]] = [
        _gain_bias(bands, i, inst_class.name) for i in layout.thermal
    ]
    pan_gain = pan_bias = None
    if layout.panchromatic is not None:
        pan_gain, pan_bias = _gain_bias(
            bands, layout.panchromatic, inst_class.name)

    return CalibrationVectors(
        reflective_gains=tuple(g for g, _ in refl),
        reflective_biases=tuple(b for _, b in refl),
        thermal_gains=tuple(g for g, _ in thermal),
        thermal_biases=tuple(b for _, b in thermal),
        pan_gain=pan_gain,
        pan_bias=pan_bias,
    )
