# -*- coding: utf-8 -*-
"""
HDF Container Writer - Legacy container with externally stored bands.

Writes the legacy scientific-data container using h5py. Each band becomes
a dataset whose samples stay in the band's raw binary file (HDF external
storage at offset 0), so no pixel data is copied. Dimensions are labelled
``YDim``/``XDim`` and attributes are stored with explicit numpy dtypes so
their on-disk types match the requested ``AttributeType``.

Dependencies
------------
h5py

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
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

try:
    import h5py
    _HAS_H5PY = True
except ImportError:
    _HAS_H5PY = False

# Package internal
from espa_formats.IO.base import DEFAULT_DIM_NAMES, ContainerWriter
from espa_formats.exceptions import DependencyError, ValidationError, WriteError
from espa_formats.vocabulary import AttributeType, DataType

logger = logging.getLogger(__name__)


def _raw_dtype(data_type: DataType) -> np.dtype:
    # Raw ESPA bands are little-endian
    return np.dtype(data_type.numpy_dtype).newbyteorder('<')


def _attribute_path(target: Any, name: str) -> str:
    # h5py names are absolute; the root is "/"
    return f"{target.name.rstrip('/')}/{name}"


class HDFContainerWriter(ContainerWriter):
    """Write the legacy container with h5py.

    Parameters
    ----------
    filepath : str or Path
        Output container path. An existing file is overwritten.

    Raises
    ------
    DependencyError
        If h5py is not installed.
    WriteError
        If the container cannot be created.

    Examples
    --------
    >>> from espa_formats.IO.hdf import HDFContainerWriter
    >>> from espa_formats.vocabulary import AttributeType, DataType
    >>> with HDFContainerWriter('scene.hdf') as w:
    ...     sds = w.create_external_band('band1', DataType.INT16,
    ...                                  (7001, 8001), 'scene_sr_band1.img')
    ...     w.write_text_attribute(sds, 'long_name', 'band 1 reflectance')
    ...     w.write_numeric_attribute(sds, '_FillValue', (-9999,),
    ...                               AttributeType.INT32)
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        if not _HAS_H5PY:
            raise DependencyError(
                "h5py is required for HDF writing. "
                "Install with: pip install h5py"
            )
        super().__init__(filepath)
        try:
            self._file = h5py.File(str(self.filepath), 'w')
        except OSError as e:
            raise WriteError("Failed to create container",
                             target=str(self.filepath)) from e

    @property
    def root(self) -> Any:
        return self._file

    @property
    def library_version(self) -> Optional[str]:
        return f"HDF5 Version {h5py.version.hdf5_version}"

    def create_external_band(
        self,
        name: str,
        data_type: DataType,
        dims: Tuple[int, int],
        external_file: Union[str, Path],
        dim_names: Tuple[str, str] = DEFAULT_DIM_NAMES,
    ) -> Any:
        """Create a dataset backed by a raw binary file.

        The external file name is recorded as given, so relative names
        resolve against the reader's working directory.

        Parameters
        ----------
        name : str
            SDS name.
        data_type : DataType
            Sample type of the raw file.
        dims : Tuple[int, int]
            ``(lines, samples)``.
        external_file : str or Path
            Raw binary file holding the samples, read from offset 0.
        dim_names : Tuple[str, str]
            Dimension labels.

        Returns
        -------
        h5py.Dataset
        """
        dtype = _raw_dtype(data_type)
        nbytes = int(dims[0]) * int(dims[1]) * dtype.itemsize
        try:
            ds = self._file.create_dataset(
                name,
                shape=tuple(int(d) for d in dims),
                dtype=dtype,
                external=[(str(external_file), 0, nbytes)],
            )
            for dim, label in zip(ds.dims, dim_names):
                dim.label = label
        except (OSError, RuntimeError, ValueError, TypeError) as e:
            raise WriteError("Failed to create SDS",
                             target=name) from e
        logger.debug("Created SDS %s backed by %s", name, external_file)
        return ds

    def write_text_attribute(self, target: Any, name: str, text: str) -> None:
        try:
            target.attrs[name] = text
        except (OSError, RuntimeError, ValueError, TypeError) as e:
            raise WriteError("Failed to write attribute",
                             target=_attribute_path(target, name)) from e

    def write_numeric_attribute(
        self,
        target: Any,
        name: str,
        values: Sequence[Union[int, float]],
        attr_type: AttributeType,
    ) -> None:
        if attr_type is AttributeType.CHAR8:
            raise ValidationError(
                f"Attribute {name} is text; use write_text_attribute"
            )
        try:
            target.attrs.create(
                name, np.asarray(values, dtype=attr_type.value))
        except (OSError, RuntimeError, ValueError, TypeError) as e:
            raise WriteError("Failed to write attribute",
                             target=_attribute_path(target, name)) from e

    def close(self) -> None:
        """Close the HDF file handle."""
        if self._file is not None:
            self._file.close()
            self._file = None
