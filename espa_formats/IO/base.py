# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for legacy product writers.

Defines abstract base classes for the two output surfaces: a container
writer that holds externally stored bands plus typed attributes, and a
raster converter that turns one raw band file into a standalone image.
All concrete implementations (HDF, GeoTIFF) must inherit from these
classes.

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from espa_formats.vocabulary import AttributeType, DataType

DEFAULT_DIM_NAMES = ('YDim', 'XDim')


class ContainerWriter(ABC):
    """
    Abstract base class for container writers.

    A container holds scientific datasets whose samples live in external
    raw files, plus text and numeric attributes on the file root and on
    each dataset. Handles returned by ``root`` and
    ``create_external_band`` are opaque to callers and only passed back
    to the attribute methods.

    Attributes
    ----------
    filepath : Path
        Path of the container being written
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the container writer.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path where the container will be written
        """
        self.filepath = Path(filepath)

    @property
    @abstractmethod
    def root(self) -> Any:
        """Handle for file-level (global) attributes."""
        pass

    @property
    def library_version(self) -> Optional[str]:
        """Version string of the underlying format library, if known."""
        return None

    @abstractmethod
    def create_external_band(
        self,
        name: str,
        data_type: DataType,
        dims: Tuple[int, int],
        external_file: Union[str, Path],
        dim_names: Tuple[str, str] = DEFAULT_DIM_NAMES,
    ) -> Any:
        """
        Create a dataset whose samples are read from a raw binary file.

        Parameters
        ----------
        name : str
            Dataset name
        data_type : DataType
            Sample type of the raw file
        dims : Tuple[int, int]
            ``(lines, samples)``
        external_file : Union[str, Path]
            Raw binary file holding the samples at offset 0
        dim_names : Tuple[str, str], default=('YDim', 'XDim')
            Labels of the two dimensions

        Returns
        -------
        Any
            Handle for the dataset's attributes

        Raises
        ------
        WriteError
            If the dataset cannot be created
        """
        pass

    @abstractmethod
    def write_text_attribute(self, target: Any, name: str, text: str) -> None:
        """
        Attach a text attribute to ``target``.

        Raises
        ------
        WriteError
            If the attribute cannot be written
        """
        pass

    @abstractmethod
    def write_numeric_attribute(
        self,
        target: Any,
        name: str,
        values: Sequence[Union[int, float]],
        attr_type: AttributeType,
    ) -> None:
        """
        Attach a numeric attribute of ``attr_type`` to ``target``.

        Raises
        ------
        WriteError
            If the attribute cannot be written
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing. Override if the writer
        maintains open file handles or other resources.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class RasterConverter(ABC):
    """
    Abstract base class for single-band raster converters.

    Converts one raw band file into a standalone image file in the
    concrete converter's format.
    """

    @abstractmethod
    def convert(
        self,
        source: Union[str, Path],
        fill: Optional[Union[int, float]],
        destination: Union[str, Path],
    ) -> None:
        """
        Convert ``source`` into ``destination``.

        Parameters
        ----------
        source : Union[str, Path]
            Raw band file
        fill : Optional[Union[int, float]]
            Value recorded as nodata; None records none
        destination : Union[str, Path]
            Output image path

        Raises
        ------
        WriteError
            If the source cannot be read or the output cannot be written
        """
        pass
