"""Installation metadata - Read-only queries used by installation drivers.

Mechanism only: this module reads what the graph says about installing a
component. Running scripts and ordering installs is the driver's policy.
"""

import logging
from pathlib import Path

from .exceptions import ComponentNotFoundError
from .keynodes import Keynodes
from .protocols import EdgeType
from .protocols import ElementType
from .protocols import GraphQueryProtocol
from .protocols import Node
from .resolver import AddressResolver
from .schema import InstallMetadata
from .utils import component_dir_path

logger = logging.getLogger(__name__)


class DependencyResolver:
    """
    Read installation metadata and dependencies of components.

    Example:
        >>> resolver = DependencyResolver(graph, Keynodes())
        >>> for dependency in resolver.walk_dependencies("my_component"):
        ...     print(dependency, resolver.get_install_scripts(dependency))
    """

    def __init__(
        self,
        graph: GraphQueryProtocol,
        keynodes: Keynodes,
        address_resolver: AddressResolver | None = None,
    ):
        self.graph = graph
        self.keynodes = keynodes
        self.address_resolver = address_resolver or AddressResolver(graph, keynodes)

    def is_reusable(self, component: Node) -> bool:
        """Check if component belongs to the reusable component class."""
        if not self.graph.edge_exists(self.keynodes.concept_reusable_component, component, EdgeType.ACCESS):
            logger.warning(f"Component {component} is not a reusable component")
            return False
        return True

    def get_install_scripts(self, component: Node) -> list[str]:
        """
        Get installation scripts of a component.

        Scripts with empty content are dropped. Duplicates are kept: knowledge
        bases that describe one repository with two specifications yield every
        script twice, and consumers rely on seeing them as stored.

        Args:
            component: Component node

        Returns:
            Script contents in graph order
        """
        scripts = []
        for match in self.graph.iterate_quintuples(
            component,
            EdgeType.COMMON,
            ElementType.LINK,
            EdgeType.ACCESS,
            self.keynodes.nrel_installation_script,
        ):
            script = self.graph.get_link_content(match[2])
            if script:
                scripts.append(script)
            logger.debug(f"Install script found for {component}: {script}")
        return scripts

    def is_component_installation_method_valid(self, component: Node) -> bool:
        """Check if component has an installation method."""
        if self.address_resolver.get_component_installation_method(component) is None:
            logger.warning(f"Installation method of component {component} isn't valid")
            return False
        return True

    def get_component_address_str(self, component: Node) -> str:
        """
        Get component address as a string.

        Returns:
            Address content, or "" if the address is unset
        """
        address = self.address_resolver.get_component_address(component)
        if address is None:
            return ""
        return self.graph.get_link_content(address) or ""

    def get_component_dir_name(self, component: Node, specs_root: Path) -> Path:
        """
        Get directory a component's specification lives in.

        The last segment of the component address is joined onto specs_root.

        Args:
            component: Component node
            specs_root: Root directory of specifications (app policy)

        Returns:
            Component directory path

        Raises:
            ComponentNotFoundError: If the component address is unset
        """
        address = self.get_component_address_str(component)
        dir_path = component_dir_path(specs_root, address)
        if dir_path is None:
            raise ComponentNotFoundError(
                f"Component {component} has no usable address",
                context={"component": component, "address": address},
            )
        return dir_path

    def get_component_dependencies(self, component: Node) -> set[Node]:
        """Get direct dependencies of a component."""
        return self.address_resolver.get_component_dependencies(component)

    def walk_dependencies(self, component: Node) -> list[Node]:
        """
        Get transitive dependencies in install order.

        Dependencies come before the components that need them. Cycles are
        broken at the first revisit. The component itself is not included.

        Args:
            component: Root component node

        Returns:
            Dependency nodes, each once
        """
        order: list[Node] = []
        visited: set[Node] = {component}
        # Each frame holds a node and the dependencies still to visit,
        # sorted for a deterministic install order
        stack = [(component, iter(sorted(self.get_component_dependencies(component))))]

        while stack:
            node, pending = stack[-1]
            dependency = next((d for d in pending if d not in visited), None)
            if dependency is None:
                stack.pop()
                if node != component:
                    order.append(node)
                continue
            visited.add(dependency)
            stack.append((dependency, iter(sorted(self.get_component_dependencies(dependency)))))

        return order

    def get_install_metadata(self, component: Node) -> InstallMetadata:
        """Collect everything an installer needs to know about a component."""
        return InstallMetadata(
            component=component,
            reusable=self.is_reusable(component),
            installation_method_valid=self.is_component_installation_method_valid(component),
            address=self.get_component_address_str(component),
            scripts=self.get_install_scripts(component),
            dependencies=sorted(self.get_component_dependencies(component)),
        )
