"""Address resolver - Locate address links of components in the knowledge graph.

Specifications may be hosted on several mirrors, so they resolve through an
alternative-addresses set with primary/fallback selection and return every
link of the chosen address. Repositories are single-sourced and resolve to
exactly one link.
"""

import logging

from .exceptions import ComponentNotFoundError
from .exceptions import InvalidComponentStateError
from .keynodes import Keynodes
from .protocols import EdgeType
from .protocols import ElementType
from .protocols import GraphQueryProtocol
from .protocols import Node

logger = logging.getLogger(__name__)


class AddressResolver:
    """
    Resolve component, specification and repository addresses (read-only).

    Graph and keynodes are injected; the resolver never writes to the graph.
    """

    def __init__(self, graph: GraphQueryProtocol, keynodes: Keynodes):
        """Initialize resolver with app-provided graph and bound keynodes.

        Args:
            graph: Knowledge graph to query
            keynodes: Class and relation nodes bound for this graph
        """
        self.graph = graph
        self.keynodes = keynodes

    def _related(self, subject: Node, relation: Node, target_type: ElementType):
        """Iterate targets reached from subject through a binary relation."""
        for match in self.graph.iterate_quintuples(
            subject, EdgeType.COMMON, target_type, EdgeType.ACCESS, relation
        ):
            yield match[2]

    def _members(self, set_node: Node, target_type: ElementType = ElementType.ANY):
        """Iterate members of a set node."""
        for match in self.graph.iterate_triples(set_node, EdgeType.ACCESS, target_type):
            yield match[2]

    def _primary_member(self, set_node: Node) -> Node | None:
        """Get set member marked with the primary role, if any."""
        for match in self.graph.iterate_quintuples(
            set_node, EdgeType.ACCESS, ElementType.ANY, EdgeType.ACCESS, self.keynodes.rrel_1
        ):
            return match[2]
        return None

    def get_component_address(self, component: Node) -> Node | None:
        """
        Get link holding the component address.

        Args:
            component: Component node

        Returns:
            Address link, or None if the component has no address
        """
        return next(self._related(component, self.keynodes.nrel_component_address, ElementType.LINK), None)

    def get_component_dependencies(self, component: Node) -> set[Node]:
        """
        Get all dependencies of a component.

        Members of every dependency set attached to the component are unioned.

        Args:
            component: Component node

        Returns:
            Dependency nodes (empty if the component declares none)
        """
        dependencies: set[Node] = set()
        for dependency_set in self._related(component, self.keynodes.nrel_component_dependencies, ElementType.NODE):
            dependencies.update(self._members(dependency_set, ElementType.NODE))
        return dependencies

    def get_component_installation_method(self, component: Node) -> Node | None:
        """
        Get installation method of a component.

        Args:
            component: Component node

        Returns:
            Installation method node, or None if absent
        """
        return next(self._related(component, self.keynodes.nrel_installation_method, ElementType.NODE), None)

    def get_specification_address(self, specification: Node) -> list[Node]:
        """
        Get links of the preferred specification address.

        Resolution:
        1. Follow the alternative-addresses relation to the address set
        2. Pick the member marked primary, else any member
        3. Return every link attached to that address (mirrors)

        Args:
            specification: Reusable component specification node

        Returns:
            Non-empty list of address links

        Raises:
            ComponentNotFoundError: If the specification has no alternative addresses
            InvalidComponentStateError: If the address set is empty or the
                chosen address has no links
        """
        context = {"specification": specification}

        addresses_set = next(
            self._related(specification, self.keynodes.nrel_alternative_addresses, ElementType.TUPLE), None
        )
        if addresses_set is None:
            raise ComponentNotFoundError("No alternative addresses set found", context=context)

        if next(self._members(addresses_set), None) is None:
            raise InvalidComponentStateError(
                "Alternative addresses set is empty", context={**context, "addresses_set": addresses_set}
            )

        address = self._primary_member(addresses_set)
        if address is None:
            address = next(self._members(addresses_set))
            logger.debug(f"No primary address for {specification}, using {address}")

        links = list(self._members(address, ElementType.LINK))
        if not links:
            raise InvalidComponentStateError(
                "No links connected with address node", context={**context, "address": address}
            )

        logger.debug(f"Resolved {len(links)} link(s) for specification {specification}")
        return links

    def get_repository_address(self, repository: Node) -> Node:
        """
        Get link of the repository address.

        Args:
            repository: Repository node

        Returns:
            Address link

        Raises:
            ComponentNotFoundError: If the repository has no address or the
                address has no link
        """
        context = {"repository": repository}

        address = next(self._related(repository, self.keynodes.nrel_repository_address, ElementType.NODE), None)
        if address is None:
            raise ComponentNotFoundError("No address found for repository", context=context)

        link = next(self._members(address, ElementType.LINK), None)
        if link is None:
            raise ComponentNotFoundError(
                "No links for repository address found", context={**context, "address": address}
            )

        return link
