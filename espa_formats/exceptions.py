# -*- coding: utf-8 -*-
"""
Exception Hierarchy - Domain-specific exceptions for format conversion.

Provides a small exception hierarchy that lets callers catch conversion
failures distinctly from Python built-in exceptions. All exceptions
subclass both ``ConversionError`` and the appropriate built-in exception
for backward compatibility with code that catches ``ValueError`` or
``OSError``.

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

from typing import Optional


class ConversionError(Exception):
    """Base exception for all conversion errors."""


class ValidationError(ConversionError, ValueError):
    """Invalid input metadata, parameters, or configuration.

    Raised for unsupported data types, multi-resolution products,
    malformed metadata values, and other input validation failures.
    """


class MissingBandError(ValidationError):
    """A required legacy band slot has no matching input band.

    Parameters
    ----------
    slot_index : int
        Zero-based index of the slot in the legacy slot table.
    band_name : str
        Modern band name the slot expected to find.
    """

    def __init__(self, slot_index: int, band_name: str) -> None:
        self.slot_index = slot_index
        self.band_name = band_name
        super().__init__(
            f"Band {band_name} (legacy slot {slot_index}) was not found in "
            f"the metadata, but it is expected to be available for output"
        )


class CalibrationError(ValidationError):
    """Calibration data exists for the scene but is incomplete.

    Raised when band 0 carries a gain/bias pair but the band list ends
    before a position the instrument layout classifies.
    """


class SizeLimitError(ConversionError, ValueError):
    """A derived string exceeds its fixed size budget.

    Raised for formatted description text, output filenames, and
    header band counts. Values are never truncated.
    """


class WriteError(ConversionError, OSError):
    """An external writer or converter failed.

    Parameters
    ----------
    message : str
        Description of the failure.
    target : str, optional
        Attribute, band, or file name involved in the failure.
    """

    def __init__(self, message: str, target: Optional[str] = None) -> None:
        self.target = target
        if target is not None:
            message = f"{message}: {target}"
        super().__init__(message)


class DependencyError(ConversionError, ImportError):
    """Missing optional dependency required for a specific writer.

    Raised when a writer requires a package (h5py, rasterio) that is
    not installed.
    """
