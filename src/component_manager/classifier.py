"""Classification of downloadable nodes and address links.

Kinds are derived from membership in a short, ordered list of class nodes.
New kinds or schemes are added by extending the lists, not by subclassing.
"""

from enum import Enum

from .keynodes import Keynodes
from .protocols import EdgeType
from .protocols import GraphQueryProtocol
from .protocols import Node


class DownloadableKind(str, Enum):
    """What a node can be downloaded as."""

    REPOSITORY = "repository"
    REUSABLE_COMPONENT_SPECIFICATION = "reusable_component_specification"
    UNCLASSIFIED = "unclassified"


class LinkScheme(str, Enum):
    """Which URL scheme an address link carries."""

    GITHUB = "github"
    GOOGLE_DRIVE = "google_drive"
    UNCLASSIFIED = "unclassified"


def _downloadable_classes(keynodes: Keynodes) -> list[tuple[Node, DownloadableKind]]:
    return [
        (keynodes.concept_repository, DownloadableKind.REPOSITORY),
        (keynodes.concept_reusable_component_specification, DownloadableKind.REUSABLE_COMPONENT_SPECIFICATION),
    ]


def _link_classes(keynodes: Keynodes) -> list[tuple[Node, LinkScheme]]:
    return [
        (keynodes.concept_github_url, LinkScheme.GITHUB),
        (keynodes.concept_google_drive_url, LinkScheme.GOOGLE_DRIVE),
    ]


def classify_downloadable(graph: GraphQueryProtocol, keynodes: Keynodes, node: Node) -> DownloadableKind:
    """
    Classify node as a downloadable kind.

    Classes are checked in fixed order (repository, then specification);
    the first class with a membership arc to the node wins.

    Args:
        graph: Knowledge graph
        keynodes: Bound keynodes
        node: Node to classify

    Returns:
        Matching kind, or DownloadableKind.UNCLASSIFIED
    """
    for class_node, kind in _downloadable_classes(keynodes):
        if graph.edge_exists(class_node, node, EdgeType.ACCESS):
            return kind
    return DownloadableKind.UNCLASSIFIED


def classify_link(graph: GraphQueryProtocol, keynodes: Keynodes, link: Node) -> LinkScheme:
    """
    Classify address link by URL scheme.

    Args:
        graph: Knowledge graph
        keynodes: Bound keynodes
        link: Link node holding a URL

    Returns:
        Matching scheme, or LinkScheme.UNCLASSIFIED
    """
    for class_node, scheme in _link_classes(keynodes):
        if graph.edge_exists(class_node, link, EdgeType.ACCESS):
            return scheme
    return LinkScheme.UNCLASSIFIED
