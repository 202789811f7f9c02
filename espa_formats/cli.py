# -*- coding: utf-8 -*-
"""
Command Line - ``espa-convert`` entry point.

Usage::

    espa-convert hdf  LT50460281987092XXX01.xml LT50460281987092XXX01.hdf
    espa-convert gtif LT50460281987092XXX01.xml LT50460281987092XXX01

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
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Package internal
from espa_formats import __version__
from espa_formats.config import load_config
from espa_formats.convert import convert_espa_to_gtif, convert_espa_to_hdf
from espa_formats.exceptions import ConversionError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the ``espa-convert`` argument parser."""
    parser = argparse.ArgumentParser(
        prog='espa-convert',
        description='Convert ESPA raw binary products to legacy formats.',
    )
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {__version__}',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML file overriding the packaged defaults.',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug messages.',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    hdf = sub.add_parser(
        'hdf', help='Write the legacy HDF product and its ENVI header.')
    hdf.add_argument('xml', type=Path, help='ESPA metadata XML file.')
    hdf.add_argument('hdf', type=Path, help='Output HDF file.')

    gtif = sub.add_parser('gtif', help='Write one GeoTIFF per band.')
    gtif.add_argument('xml', type=Path, help='ESPA metadata XML file.')
    gtif.add_argument(
        'base',
        help=("Output base name; files are named '<base>_<band>.<ext>', "
              "with <ext> from the geotiff.extension setting."),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = load_config(args.config)
        if args.command == 'hdf':
            convert_espa_to_hdf(args.xml, args.hdf, config=config)
        else:
            convert_espa_to_gtif(args.xml, args.base, config=config)
    except (ConversionError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
