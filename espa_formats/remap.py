# -*- coding: utf-8 -*-
"""
Legacy Band Remap - Map ESPA band names onto the legacy SDS layout.

The legacy HDF product lists its SDSs in a fixed order under fixed
names. ``LEGACY_SLOTS`` holds that layout as data: each slot pairs the
modern ESPA band name with its legacy SDS name and says whether the band
must be present. ``remap_bands`` resolves the slots against a scene's
bands and is the one place the SDS order is established.

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
from typing import List, Optional, Sequence, Tuple

# Package internal
from espa_formats.exceptions import MissingBandError
from espa_formats.models import BandMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegacySlot:
    """One SDS position in the legacy product.

    Parameters
    ----------
    modern_name : str
        ESPA band name that fills the slot.
    legacy_name : str
        SDS name written to the legacy product.
    required : bool
        Whether the conversion fails when no band fills the slot.
    """

    modern_name: str
    legacy_name: str
    required: bool = True


LEGACY_SLOTS: Tuple[LegacySlot, ...] = (
    LegacySlot('sr_band1', 'band1'),
    LegacySlot('sr_band2', 'band2'),
    LegacySlot('sr_band3', 'band3'),
    LegacySlot('sr_band4', 'band4'),
    LegacySlot('sr_band5', 'band5'),
    LegacySlot('sr_band7', 'band7'),
    LegacySlot('sr_atmos_opacity', 'atmos_opacity'),
    LegacySlot('sr_fill_qa', 'fill_QA'),
    LegacySlot('sr_ddv_qa', 'DDV_QA'),
    LegacySlot('sr_cloud_qa', 'cloud_QA'),
    LegacySlot('sr_cloud_shadow_qa', 'cloud_shadow_QA'),
    LegacySlot('sr_snow_qa', 'snow_QA'),
    LegacySlot('sr_land_water_qa', 'land_water_QA'),
    LegacySlot('sr_adjacent_cloud_qa', 'adjacent_cloud_QA'),
    LegacySlot('toa_band6', 'band6'),
    LegacySlot('toa_band6_qa', 'band6_fill_QA'),
    LegacySlot('fmask', 'fmask_band', required=False),
)


@dataclass
class RemappedBand:
    """Resolution of one legacy slot.

    Attributes
    ----------
    index : int
        Position of the slot in the slot table.
    slot : LegacySlot
        The slot being filled.
    band : BandMetadata, optional
        Source band, or None for an unfilled optional slot.
    """

    index: int
    slot: LegacySlot
    band: Optional[BandMetadata] = None

    @property
    def present(self) -> bool:
        return self.band is not None


def remap_bands(
    bands: Sequence[BandMetadata],
    slots: Sequence[LegacySlot] = LEGACY_SLOTS,
) -> List[RemappedBand]:
    """Resolve every legacy slot against the scene's bands.

    Parameters
    ----------
    bands : Sequence[BandMetadata]
        Scene bands in any order.
    slots : Sequence[LegacySlot]
        Slot table; defaults to ``LEGACY_SLOTS``.

    Returns
    -------
    List[RemappedBand]
        One entry per slot, in slot-table order. The first band whose
        name matches a slot fills it.

    Raises
    ------
    MissingBandError
        If a required slot has no matching band.
    """
    resolved: List[RemappedBand] = []
    for index, slot in enumerate(slots):
        match = next((b for b in bands if b.name == slot.modern_name), None)
        if match is None:
            if slot.required:
                raise MissingBandError(index, slot.modern_name)
            logger.debug("Optional band %s not present", slot.modern_name)
        resolved.append(RemappedBand(index=index, slot=slot, band=match))
    return resolved
