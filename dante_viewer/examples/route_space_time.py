#!/usr/bin/env python3
"""
Space-time plots along a route between two elements.

Loads a network with dynamic data, assembles the route between two elements
given by their hashes, highlights it in the viewer and shows space-time
matrices of detector speed and flow.

    python -m dante_viewer.examples.route_space_time FOLDER DATA_FILE ORIGIN DESTINATION
"""

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from dante_viewer import (
    NetworkViewer,
    RouteNotFoundError,
    ViewerConfig,
    find_route,
    load_network,
    plot_route,
    plot_space_time,
    space_time,
)
from dante_viewer.data.element_access import element_hash, iter_elements

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def find_element(network, hash_value: str):
    for element in iter_elements(network):
        if element_hash(element) == hash_value:
            return element
    raise KeyError(f"No element with hash {hash_value}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("data_folder")
    parser.add_argument("data_file")
    parser.add_argument("origin", help="Hash of the first element of the route")
    parser.add_argument("destination", help="Hash of the last element of the route")
    args = parser.parse_args()

    config = ViewerConfig()
    network = load_network(args.data_folder, args.data_file, config)

    try:
        route = find_route(network, find_element(network, args.origin),
                           find_element(network, args.destination), config)
    except (KeyError, RouteNotFoundError) as e:
        logger.error(f"❌ {e}")
        return 1
    logger.info(f"Route: {route.get_summary()}")

    NetworkViewer(network, config)
    plot_route(route, config)

    for kind in ('detector speed', 'detector flow'):
        plot_space_time(space_time(route, kind, config=config), kind, config=config)

    plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
