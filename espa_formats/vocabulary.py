# -*- coding: utf-8 -*-
"""
Vocabulary - Controlled enumerations shared across the package.

Defines the closed sets of band data types, attribute value types, and
output formats used by the metadata model, the attribute assembler, and
the output writers.

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

from enum import Enum


class DataType(Enum):
    """Numeric data types a raw binary band may carry.

    Values match the ``data_type`` strings used in ESPA internal
    metadata.
    """

    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"

    @property
    def numpy_dtype(self) -> str:
        """NumPy dtype string for this data type."""
        return self.value.lower()

    @property
    def envi_code(self) -> int:
        """ENVI header ``data type`` code for this data type."""
        return _ENVI_CODES[self]


_ENVI_CODES = {
    DataType.INT8: 1,
    DataType.UINT8: 1,
    DataType.INT16: 2,
    DataType.INT32: 3,
    DataType.FLOAT32: 4,
    DataType.FLOAT64: 5,
    DataType.UINT16: 12,
    DataType.UINT32: 13,
}


class AttributeType(Enum):
    """Storage types for container attributes.

    ``CHAR8`` marks a text attribute; every other member names the
    numeric type the values are written with.
    """

    CHAR8 = "char8"
    INT16 = "int16"
    INT32 = "int32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

