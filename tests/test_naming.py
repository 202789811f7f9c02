# -*- coding: utf-8 -*-
"""
Naming Tests - Output filename derivation and budgets.

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
from espa_formats.exceptions import SizeLimitError
from espa_formats.naming import band_filename, header_filename, replace_blanks


def test_blanks_replaced_in_base_and_band():
    assert band_filename('scene A', 'band 1') == 'scene_A_band_1.tif'


def test_replace_blanks_idempotent():
    once = replace_blanks('a b  c')
    assert once == 'a_b__c'
    assert replace_blanks(once) == once


def test_custom_extension():
    assert band_filename('out/LT5', 'sr_band1', extension='TIF') == \
        'out/LT5_sr_band1.TIF'


def test_length_budget_is_exclusive():
    # 'ab_c.tif' is 8 characters
    assert band_filename('ab', 'c', max_length=9) == 'ab_c.tif'
    with pytest.raises(SizeLimitError):
        band_filename('ab', 'c', max_length=8)


def test_header_filename():
    assert header_filename('out/scene.hdf') == 'out/scene.hdf.hdr'


def test_header_filename_budget():
    with pytest.raises(SizeLimitError):
        header_filename('x' * 1020)
