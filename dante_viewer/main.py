#!/usr/bin/env python3
"""
Dante Network Viewer - Command Line Interface

Usage:
    dante-viewer                          folder and data file through dialogs
    dante-viewer DATA_FOLDER              network without dynamic data
    dante-viewer DATA_FOLDER DATA_FILE    network with dynamic data
"""

import argparse
import logging
import sys

from .config import ViewerConfig
from .data import NetworkUnavailableError
from .visualization import view_network


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dante-viewer',
        description="Show a network of downloaded Dante data for visual inspection "
                    "of element properties, connections and detector data")
    parser.add_argument("data_folder", nargs='?', help="Network folder (dialog when omitted)")
    parser.add_argument("data_file", nargs='?', help="Data file with dynamic data")
    parser.add_argument("--network-class", default=ViewerConfig.network_class,
                        help="Dotted path of the external network class")
    parser.add_argument("--presentation", action="store_true",
                        help="Larger fonts for projectors and large screens")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"], help="Log level")
    return parser


def main(argv=None) -> int:
    """Start the viewer."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper()),
                        format='%(levelname)s: %(message)s')

    if args.presentation:
        config = ViewerConfig.create_presentation_config()
    else:
        config = ViewerConfig.create_default_config()
    config.network_class = args.network_class

    try:
        viewer = view_network(args.data_folder, args.data_file, config)
    except (NetworkUnavailableError, FileNotFoundError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if viewer is None:
        print("Cancelled, no network selected")
    return 0


if __name__ == "__main__":
    sys.exit(main())
