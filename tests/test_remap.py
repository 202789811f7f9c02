# -*- coding: utf-8 -*-
"""
Remap Tests - Legacy SDS slot resolution.

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
from espa_formats.exceptions import MissingBandError
from espa_formats.remap import LEGACY_SLOTS, LegacySlot, remap_bands

from conftest import make_band, make_scene


def test_slot_table():
    assert len(LEGACY_SLOTS) == 17
    assert LEGACY_SLOTS[0] == LegacySlot('sr_band1', 'band1')
    assert LEGACY_SLOTS[14].legacy_name == 'band6'
    assert [s.modern_name for s in LEGACY_SLOTS if not s.required] == ['fmask']


def test_slot_order_independent_of_band_order():
    scene = make_scene()
    remapped = remap_bands(list(reversed(scene.bands)))
    assert [r.slot.legacy_name for r in remapped] == [
        s.legacy_name for s in LEGACY_SLOTS]
    assert all(r.band.name == r.slot.modern_name for r in remapped)
    assert [r.index for r in remapped] == list(range(17))


def test_optional_fmask_absent():
    scene = make_scene(include_fmask=False)
    remapped = remap_bands(scene.bands)
    assert len(remapped) == 17
    assert remapped[-1].slot.modern_name == 'fmask'
    assert not remapped[-1].present
    assert all(r.present for r in remapped[:-1])


def test_missing_required_band():
    scene = make_scene()
    bands = [b for b in scene.bands if b.name != 'sr_cloud_qa']
    with pytest.raises(MissingBandError) as excinfo:
        remap_bands(bands)
    assert excinfo.value.slot_index == 9
    assert excinfo.value.band_name == 'sr_cloud_qa'


def test_first_match_wins():
    scene = make_scene()
    duplicate = make_band('sr_band1', file_name='second.img')
    remapped = remap_bands(scene.bands + [duplicate])
    assert remapped[0].band.file_name == 'scene_sr_band1.img'


def test_custom_slots():
    bands = [make_band('a'), make_band('b')]
    slots = (LegacySlot('b', 'first'), LegacySlot('c', 'second', False))
    remapped = remap_bands(bands, slots)
    assert remapped[0].band.name == 'b'
    assert not remapped[1].present
