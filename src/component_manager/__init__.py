"""component-manager - Resolve and download components described in a knowledge graph.

Public API exports.

This is library mechanism: apps inject the graph, keynodes, fetchers and
download paths.
"""

from .classifier import DownloadableKind
from .classifier import LinkScheme
from .classifier import classify_downloadable
from .classifier import classify_link
from .discovery import discover_specification_files
from .discovery import load_specifications_in_dir
from .downloader import SPECIFICATION_FILENAME
from .downloader import ComponentDownloader
from .exceptions import ClassificationError
from .exceptions import ComponentError
from .exceptions import ComponentNotFoundError
from .exceptions import DownloadDirectoryError
from .exceptions import FetchError
from .exceptions import InvalidComponentStateError
from .fetchers import GitHubSvnFetcher
from .installer import DependencyResolver
from .keynodes import Keynodes
from .protocols import EdgeType
from .protocols import ElementType
from .protocols import GraphQueryProtocol
from .protocols import ProtocolDownloaderProtocol
from .protocols import SpecificationLoaderProtocol
from .resolver import AddressResolver
from .schema import DownloadReport
from .schema import InstallMetadata
from .schema import LinkResult
from .schema import LinkStatus
from .utils import extract_component_dir_name

__all__ = [
    # Graph seams
    "GraphQueryProtocol",
    "EdgeType",
    "ElementType",
    "Keynodes",
    # Classification
    "DownloadableKind",
    "LinkScheme",
    "classify_downloadable",
    "classify_link",
    # Resolution
    "AddressResolver",
    "DependencyResolver",
    "InstallMetadata",
    # Download
    "ComponentDownloader",
    "DownloadReport",
    "LinkResult",
    "LinkStatus",
    "ProtocolDownloaderProtocol",
    "GitHubSvnFetcher",
    "SPECIFICATION_FILENAME",
    # Specification files
    "SpecificationLoaderProtocol",
    "discover_specification_files",
    "load_specifications_in_dir",
    # Exceptions
    "ComponentError",
    "ClassificationError",
    "ComponentNotFoundError",
    "InvalidComponentStateError",
    "DownloadDirectoryError",
    "FetchError",
    # Utilities
    "extract_component_dir_name",
]

__version__ = "0.1.0"
