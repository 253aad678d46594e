"""Protocols for the collaborators the component manager consumes.

The knowledge graph, the fetch tools and the specification parser all live
outside this library. Apps provide implementations; the library only
requires these interfaces.
"""

from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import Protocol
from typing import runtime_checkable

Node = str
"""Opaque identifier of a graph element (node, link or edge)."""


class EdgeType(str, Enum):
    """Kinds of graph arcs the resolvers query."""

    COMMON = "common"  # binary relation arc, annotated by an nrel_* node
    ACCESS = "access"  # positive permanent membership arc


class ElementType(str, Enum):
    """Target filters for triple and quintuple queries."""

    ANY = "any"
    NODE = "node"  # any node, tuples included
    TUPLE = "tuple"
    LINK = "link"


@runtime_checkable
class GraphQueryProtocol(Protocol):
    """Read-only query interface over the external knowledge graph."""

    def edge_exists(self, source: Node, target: Node, edge_type: EdgeType) -> bool:
        """Check whether an arc of ``edge_type`` goes from ``source`` to ``target``."""
        ...

    def iterate_triples(
        self, subject: Node, edge_type: EdgeType, target_type: ElementType
    ) -> Iterator[tuple[Node, Node, Node]]:
        """Iterate ``(subject, edge, target)`` matches."""
        ...

    def iterate_quintuples(
        self,
        subject: Node,
        edge_type: EdgeType,
        target_type: ElementType,
        attr_edge_type: EdgeType,
        relation: Node,
    ) -> Iterator[tuple[Node, Node, Node, Node, Node]]:
        """Iterate ``(subject, edge, target, attr_edge, relation)`` matches.

        ``relation`` must reach ``edge`` through an arc of ``attr_edge_type``.
        """
        ...

    def get_link_content(self, link: Node) -> str | None:
        """Get the string content of a link, or None if unavailable."""
        ...

    def get_system_identifier(self, node: Node) -> str | None:
        """Get the human-readable system identifier of a node."""
        ...

    def find_node(self, identifier: str) -> Node | None:
        """Find a node by its system identifier."""
        ...


@runtime_checkable
class ProtocolDownloaderProtocol(Protocol):
    """Protocol for source fetchers (one implementation per URL scheme).

    Example implementations:
    - GitHubSvnFetcher: GitHub repositories via ``svn export``
    - A Google Drive fetcher could be registered the same way
    """

    def build_source(self, url: str, relative_path: str) -> str:
        """Compose the fetchable locator for ``url`` and a path inside it.

        Args:
            url: Base URL stored in the address link
            relative_path: Path inside the source ("" for the whole source)

        Returns:
            Fully-qualified source locator passed to fetch()
        """
        ...

    def fetch(self, source: str, target_dir: Path) -> None:
        """Fetch source into target directory.

        Args:
            source: Fully-qualified source locator
            target_dir: Existing directory to write into

        Raises:
            FetchError: If the fetch fails
        """
        ...


class SpecificationLoaderProtocol(Protocol):
    """Protocol for the external specification-file parser."""

    def load_file(self, path: Path) -> None:
        """Load one specification file into the knowledge graph."""
        ...
