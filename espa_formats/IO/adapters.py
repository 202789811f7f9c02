# -*- coding: utf-8 -*-
"""
Output Adapters - Replay assembled products onto concrete writers.

The conversion layer decides everything: SDS order, names, attribute
lists, and output paths. These functions only walk that plan and call
the writer or converter, so any ``ContainerWriter`` or
``RasterConverter`` can be substituted (tests use in-memory recorders).

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
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple, Union

# Package internal
from espa_formats.IO.base import ContainerWriter, RasterConverter
from espa_formats.attributes import Attribute
from espa_formats.vocabulary import DataType

logger = logging.getLogger(__name__)


@dataclass
class SDSPlan:
    """One externally stored SDS and its attributes.

    Attributes
    ----------
    name : str
        Legacy SDS name.
    source_name : str
        Band name the SDS was taken from.
    data_type : DataType
        Sample type of the raw file.
    dims : Tuple[int, int]
        ``(lines, samples)``.
    external_file : str
        Raw binary file backing the SDS.
    attributes : List[Attribute]
        SDS attributes in write order.
    """

    name: str
    source_name: str
    data_type: DataType
    dims: Tuple[int, int]
    external_file: str
    attributes: List[Attribute] = field(default_factory=list)


@dataclass
class RasterPlan:
    """One raw band to convert into a standalone raster."""

    source: str
    fill: Optional[Union[int, float]]
    destination: str


def write_attribute(writer: ContainerWriter, target: Any,
                    attribute: Attribute) -> None:
    """Write one attribute with the call matching its type."""
    if attribute.is_text:
        writer.write_text_attribute(target, attribute.name, attribute.value)
    else:
        writer.write_numeric_attribute(
            target, attribute.name, attribute.value, attribute.type)


def emit_container(
    writer: ContainerWriter,
    scene_attrs: Sequence[Attribute],
    sds_list: Sequence[SDSPlan],
) -> None:
    """Write every SDS in order, then the global attributes.

    Parameters
    ----------
    writer : ContainerWriter
        Open container writer.
    scene_attrs : Sequence[Attribute]
        Global attributes in write order.
    sds_list : Sequence[SDSPlan]
        SDSs in write order.

    Raises
    ------
    WriteError
        Propagated from the writer; nothing after the failure is written.
    """
    for sds in sds_list:
        logger.info("Processing SDS: %s --> %s", sds.source_name, sds.name)
        handle = writer.create_external_band(
            sds.name, sds.data_type, sds.dims, sds.external_file)
        for attribute in sds.attributes:
            write_attribute(writer, handle, attribute)

    root = writer.root
    for attribute in scene_attrs:
        write_attribute(writer, root, attribute)


def emit_rasters(converter: RasterConverter,
                 rasters: Sequence[RasterPlan]) -> None:
    """Convert each planned raster in order, stopping at the first failure."""
    for raster in rasters:
        logger.info("Converting %s to %s", raster.source, raster.destination)
        converter.convert(raster.source, raster.fill, raster.destination)
