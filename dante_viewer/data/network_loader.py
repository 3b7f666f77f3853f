"""
Construction and loading of networks from the external graph library.
"""

import importlib
import logging
import os
from typing import Any, Optional, Tuple

from ..config.viewer_config import ViewerConfig

logger = logging.getLogger(__name__)


class NetworkUnavailableError(RuntimeError):
    """Raised when the external network class cannot be created."""


def resolve_class(dotted_path: str) -> Any:
    """
    Import a class from a dotted path.

    Accepts both ``package.module.Class`` and ``package.module:Class``.
    """
    if ':' in dotted_path:
        module_name, _, attr = dotted_path.partition(':')
    else:
        module_name, _, attr = dotted_path.rpartition('.')
    if not module_name or not attr:
        raise ValueError(f"Not a dotted class path: {dotted_path}")
    module = importlib.import_module(module_name)
    return getattr(module, attr)


def create_network(config: Optional[ViewerConfig] = None) -> Any:
    """
    Create a new, empty network object.

    Done before asking for any folder or file, so users don't browse to a
    network only to find out the external library is not available.

    Raises:
        NetworkUnavailableError: If the network class cannot be created
    """
    config = config or ViewerConfig()
    try:
        network_class = resolve_class(config.network_class)
        return network_class()
    except Exception as e:
        raise NetworkUnavailableError(
            f"Could not create a new {config.network_class.rpartition('.')[2]}. "
            f"Make sure that the external network library (e.g. 'DanteExport.jar') "
            f"is available to Python before starting the viewer ({e})"
        ) from e


def load_network(data_folder: str, data_file: Optional[str] = None,
                 config: Optional[ViewerConfig] = None, network: Any = None) -> Any:
    """
    Load a network and, optionally, its dynamic data.

    Args:
        data_folder: Folder with the network definition
        data_file: Data file with dynamic data, None for the network only
        config: Viewer configuration
        network: Existing empty network, created when None

    Returns:
        The loaded network object

    Raises:
        FileNotFoundError: If the folder or data file does not exist
        NetworkUnavailableError: If no network can be created
    """
    if not os.path.isdir(data_folder):
        raise FileNotFoundError(f"Network folder not found: {data_folder}")
    if data_file and not os.path.isfile(data_file):
        raise FileNotFoundError(f"Data file not found: {data_file}")

    if network is None:
        network = create_network(config)

    logger.info(f"Loading network from: {data_folder}")
    network.loadNetwork(str(data_folder))

    if data_file:
        logger.info(f"Loading dynamic data from: {data_file}")
        network.loadData(str(data_file))
    else:
        logger.info("No data file given, showing network without dynamic data")

    return network


def ask_network_paths(initial_dir: Optional[str] = None,
                      config: Optional[ViewerConfig] = None) -> Optional[Tuple[str, Optional[str]]]:
    """
    Ask for a network folder and a data file through dialogs.

    Cancelling the data file dialog means no dynamic data is loaded.

    Returns:
        (data_folder, data_file) with data_file None when cancelled,
        or None when the folder dialog was cancelled
    """
    import tkinter as tk
    from tkinter import filedialog

    config = config or ViewerConfig()
    initial_dir = initial_dir or os.getcwd()

    root = tk.Tk()
    root.withdraw()
    try:
        data_folder = filedialog.askdirectory(
            initialdir=initial_dir, title='Please select a network folder', parent=root)
        if not data_folder:
            logger.info("Network folder selection cancelled")
            return None

        data_file = filedialog.askopenfilename(
            initialdir=data_folder,
            title='Please select a data file (cancel for none)',
            filetypes=[('Data files', config.data_file_pattern), ('All files', '*')],
            parent=root)
        return data_folder, (data_file or None)
    finally:
        root.destroy()
