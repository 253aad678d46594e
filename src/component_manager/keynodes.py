"""Registry of the pre-registered class and relation nodes.

Bound once at startup and passed by reference into every resolver call.
"""

import logging

from pydantic import BaseModel
from pydantic import ConfigDict

from .exceptions import ComponentNotFoundError
from .protocols import GraphQueryProtocol
from .protocols import Node

logger = logging.getLogger(__name__)


class Keynodes(BaseModel):
    """
    Class and relation nodes used by the resolvers (immutable).

    Field defaults are the system identifiers of the nodes, so graphs that
    use identifiers as node ids can use ``Keynodes()`` directly. Other graphs
    bind real node ids with ``Keynodes.from_graph(graph)``.
    """

    model_config = ConfigDict(frozen=True)

    # Downloadable classes
    concept_repository: Node = "concept_repository"
    concept_reusable_component_specification: Node = "concept_reusable_component_specification"
    concept_reusable_component: Node = "concept_reusable_component"

    # URL scheme classes
    concept_github_url: Node = "concept_github_url"
    concept_google_drive_url: Node = "concept_google_drive_url"

    # Relations
    nrel_component_address: Node = "nrel_component_address"
    nrel_component_dependencies: Node = "nrel_component_dependencies"
    nrel_installation_method: Node = "nrel_installation_method"
    nrel_installation_script: Node = "nrel_installation_script"
    nrel_alternative_addresses: Node = "nrel_alternative_addresses"
    nrel_repository_address: Node = "nrel_repository_address"

    # Role marking the primary member of a set
    rrel_1: Node = "rrel_1"

    @classmethod
    def from_graph(cls, graph: GraphQueryProtocol) -> "Keynodes":
        """
        Bind every keynode to its node in the graph.

        Args:
            graph: Graph to look the system identifiers up in

        Returns:
            Keynodes holding the graph's node ids

        Raises:
            ComponentNotFoundError: If any identifier is not registered in the graph
        """
        bound: dict[str, Node] = {}
        missing: list[str] = []

        for field_name, field in cls.model_fields.items():
            identifier = field.default
            node = graph.find_node(identifier)
            if node is None:
                missing.append(identifier)
                continue
            bound[field_name] = node

        if missing:
            raise ComponentNotFoundError(
                f"Keynodes not found in graph: {', '.join(missing)}",
                context={"missing": missing},
            )

        logger.debug(f"Bound {len(bound)} keynodes")
        return cls(**bound)
