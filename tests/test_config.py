# -*- coding: utf-8 -*-
"""
Config Tests - Packaged defaults and YAML overrides.

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
from espa_formats.config import CONFIG_PATH, ConversionConfig, load_config
from espa_formats.exceptions import ValidationError


def test_packaged_defaults_match_dataclass():
    assert CONFIG_PATH.exists()
    assert load_config() == ConversionConfig()


def test_override_keeps_other_defaults(tmp_path):
    path = tmp_path / "override.yaml"
    path.write_text("limits:\n  max_envi_bands: 10\nhdf:\n  hdf_version: HDF4.2r4\n")
    config = load_config(path)
    assert config.max_envi_bands == 10
    assert config.hdf_version == 'HDF4.2r4'
    assert config.max_filename_length == 1024
    assert config.hdfeos_version == 'HDFEOS_V2.19'


def test_empty_override(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == ConversionConfig()


def test_unknown_key(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("limits:\n  max_bands: 3\n")
    with pytest.raises(ValidationError, match='limits.max_bands'):
        load_config(path)


def test_section_must_be_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("limits: 3\n")
    with pytest.raises(ValidationError, match='limits'):
        load_config(path)


def test_document_must_be_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValidationError):
        load_config(path)
