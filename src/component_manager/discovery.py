"""Specification file discovery - Find and load downloaded specification files.

Convention: specification files sit directly in a component's download
directory and end with ``.scs``. Parsing them is the loader's job.
"""

import logging
from pathlib import Path

from .protocols import SpecificationLoaderProtocol

logger = logging.getLogger(__name__)

SPECIFICATION_EXTENSION = ".scs"


def discover_specification_files(dir_path: Path) -> list[Path]:
    """
    Discover specification files in a directory (not recursive).

    Args:
        dir_path: Directory to scan

    Returns:
        Sorted specification file paths (empty if the directory is missing)

    Example:
        >>> discover_specification_files(Path("/var/components/part_ui"))
        [PosixPath('/var/components/part_ui/specification.scs')]
    """
    if not dir_path.exists() or not dir_path.is_dir():
        return []
    return sorted(f for f in dir_path.glob(f"*{SPECIFICATION_EXTENSION}") if f.is_file())


def load_specifications_in_dir(loader: SpecificationLoaderProtocol, dir_path: Path) -> bool:
    """
    Hand every specification file in a directory to the loader.

    Args:
        loader: Specification parser provided by the app
        dir_path: Directory to load from

    Returns:
        True if at least one file was loaded
    """
    files = discover_specification_files(dir_path)
    for path in files:
        logger.debug(f"Loading specification {path}")
        loader.load_file(path)

    if not files:
        logger.debug(f"No specification files in {dir_path}")
    return bool(files)
