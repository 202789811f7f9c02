# -*- coding: utf-8 -*-
"""
Configuration - Size budgets and version strings for conversions.

Defaults live in ``config.yaml`` next to this module. A user file with
the same layout may override any subset of keys.

Dependencies
------------
pyyaml

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
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import yaml

# Package internal
from espa_formats.exceptions import ValidationError

CONFIG_PATH = Path(__file__).parent / "config.yaml"

# YAML section/key -> ConversionConfig field
_KEY_MAP = {
    ('limits', 'max_filename_length'): 'max_filename_length',
    ('limits', 'max_description_length'): 'max_description_length',
    ('limits', 'max_description_line_length'): 'max_description_line_length',
    ('limits', 'max_envi_bands'): 'max_envi_bands',
    ('hdf', 'hdf_version'): 'hdf_version',
    ('hdf', 'hdfeos_version'): 'hdfeos_version',
    ('geotiff', 'extension'): 'geotiff_extension',
}


@dataclass
class ConversionConfig:
    """Settings shared by both conversions.

    Attributes
    ----------
    max_filename_length : int
        Output paths must be shorter than this.
    max_description_length : int
        Bitmap/class description attributes must be shorter than this.
    max_description_line_length : int
        Each description line must be shorter than this.
    max_envi_bands : int
        Most bands an ENVI header may describe.
    hdf_version : str, optional
        Value of the ``HDFVersion`` attribute. None records the version
        reported by the container writer.
    hdfeos_version : str, optional
        Value of the ``HDFEOSVersion`` attribute.
    geotiff_extension : str
        Extension of per-band GeoTIFF files.
    """

    max_filename_length: int = 1024
    max_description_length: int = 5000
    max_description_line_length: int = 1024
    max_envi_bands: int = 255
    hdf_version: Optional[str] = None
    hdfeos_version: Optional[str] = "HDFEOS_V2.19"
    geotiff_extension: str = "tif"


def _flatten(cfg: Dict[str, Any], source: Path) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for section, entries in cfg.items():
        if not isinstance(entries, dict):
            raise ValidationError(
                f"Config section '{section}' in {source} must be a mapping"
            )
        for key, val in entries.items():
            name = _KEY_MAP.get((section, key))
            if name is None:
                raise ValidationError(
                    f"Unknown config key '{section}.{key}' in {source}"
                )
            values[name] = val
    return values


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValidationError(f"Config file {path} must contain a mapping")
    return _flatten(cfg, path)


def load_config(path: Optional[Union[str, Path]] = None) -> ConversionConfig:
    """Load the packaged defaults, overlaid with an optional user file.

    Parameters
    ----------
    path : str or Path, optional
        User YAML file. Keys it omits keep their defaults.

    Returns
    -------
    ConversionConfig

    Raises
    ------
    ValidationError
        If a file contains unknown keys or is not a mapping.
    """
    values = _read_yaml(CONFIG_PATH)
    if path is not None:
        values.update(_read_yaml(Path(path)))
    return ConversionConfig(**values)
