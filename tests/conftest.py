"""Shared fixtures: an in-memory knowledge graph implementing GraphQueryProtocol."""

import itertools

import pytest
from component_manager import EdgeType
from component_manager import ElementType
from component_manager import Keynodes


class InMemoryGraph:
    """Minimal knowledge graph for tests.

    Nodes are identified by their system identifier. Edges get generated ids
    so relations can point at them (quintuple queries).
    """

    def __init__(self):
        self._types: dict[str, ElementType] = {}
        self._contents: dict[str, str] = {}
        self._edges: dict[str, tuple[str, str, EdgeType]] = {}
        self._ids = itertools.count()

    # Building

    def add_node(self, identifier: str, element_type: ElementType = ElementType.NODE) -> str:
        self._types.setdefault(identifier, element_type)
        return identifier

    def add_link(self, content: str, identifier: str | None = None) -> str:
        link = identifier or f"link_{next(self._ids)}"
        self._types[link] = ElementType.LINK
        self._contents[link] = content
        return link

    def add_edge(self, source: str, target: str, edge_type: EdgeType = EdgeType.ACCESS) -> str:
        edge = f"edge_{next(self._ids)}"
        self._edges[edge] = (source, target, edge_type)
        return edge

    def add_to_class(self, class_node: str, element: str) -> str:
        return self.add_edge(self.add_node(class_node), element, EdgeType.ACCESS)

    def add_relation(self, subject: str, relation: str, target: str) -> str:
        edge = self.add_edge(subject, target, EdgeType.COMMON)
        self.add_edge(self.add_node(relation), edge, EdgeType.ACCESS)
        return edge

    def add_member(self, set_node: str, member: str, role: str | None = None) -> str:
        edge = self.add_edge(set_node, member, EdgeType.ACCESS)
        if role is not None:
            self.add_edge(self.add_node(role), edge, EdgeType.ACCESS)
        return edge

    # GraphQueryProtocol

    def _matches(self, element: str, element_type: ElementType) -> bool:
        actual = self._types.get(element)
        if element_type == ElementType.ANY:
            return True
        if element_type == ElementType.NODE:
            return actual in (ElementType.NODE, ElementType.TUPLE)
        return actual == element_type

    def edge_exists(self, source, target, edge_type):
        return any(edge == (source, target, edge_type) for edge in self._edges.values())

    def iterate_triples(self, subject, edge_type, target_type):
        for edge, (source, target, kind) in list(self._edges.items()):
            if source == subject and kind == edge_type and self._matches(target, target_type):
                yield subject, edge, target

    def iterate_quintuples(self, subject, edge_type, target_type, attr_edge_type, relation):
        for _, edge, target in self.iterate_triples(subject, edge_type, target_type):
            for attr_edge, (source, attr_target, kind) in list(self._edges.items()):
                if source == relation and attr_target == edge and kind == attr_edge_type:
                    yield subject, edge, target, attr_edge, relation

    def get_link_content(self, link):
        if self._types.get(link) != ElementType.LINK:
            return None
        return self._contents.get(link)

    def get_system_identifier(self, node):
        return node if node in self._types else None

    def find_node(self, identifier):
        return identifier if identifier in self._types else None


@pytest.fixture
def graph():
    """Empty in-memory graph."""
    return InMemoryGraph()


@pytest.fixture
def keynodes():
    """Keynodes using system identifiers as node ids."""
    return Keynodes()


@pytest.fixture
def github_repository(graph, keynodes):
    """Repository node with one GitHub address link; returns the node id."""
    repository = graph.add_node("part_ui")
    graph.add_to_class(keynodes.concept_repository, repository)
    address = graph.add_node("part_ui_address")
    graph.add_relation(repository, keynodes.nrel_repository_address, address)
    link = graph.add_link("https://github.com/org/repo")
    graph.add_member(address, link)
    graph.add_to_class(keynodes.concept_github_url, link)
    return repository


@pytest.fixture
def github_specification(graph, keynodes):
    """Specification node with a single-member address set; returns the node id."""
    specification = graph.add_node("part_ui_specification")
    graph.add_to_class(keynodes.concept_reusable_component_specification, specification)
    addresses = graph.add_node("part_ui_addresses", ElementType.TUPLE)
    graph.add_relation(specification, keynodes.nrel_alternative_addresses, addresses)
    address = graph.add_node("part_ui_spec_address")
    graph.add_member(addresses, address)
    link = graph.add_link("https://github.com/org/spec")
    graph.add_member(address, link)
    graph.add_to_class(keynodes.concept_github_url, link)
    return specification
