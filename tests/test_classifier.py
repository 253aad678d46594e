"""Tests for node and link classification."""

from component_manager import DownloadableKind
from component_manager import LinkScheme
from component_manager import classify_downloadable
from component_manager import classify_link


def test_classify_repository(graph, keynodes):
    node = graph.add_node("repo")
    graph.add_to_class(keynodes.concept_repository, node)

    assert classify_downloadable(graph, keynodes, node) == DownloadableKind.REPOSITORY


def test_classify_specification(graph, keynodes):
    node = graph.add_node("spec")
    graph.add_to_class(keynodes.concept_reusable_component_specification, node)

    assert classify_downloadable(graph, keynodes, node) == DownloadableKind.REUSABLE_COMPONENT_SPECIFICATION


def test_classify_unclassified(graph, keynodes):
    node = graph.add_node("something")
    graph.add_to_class("concept_other", node)

    assert classify_downloadable(graph, keynodes, node) == DownloadableKind.UNCLASSIFIED


def test_repository_takes_priority(graph, keynodes):
    """Malformed node in both classes classifies deterministically as repository."""
    node = graph.add_node("both")
    graph.add_to_class(keynodes.concept_reusable_component_specification, node)
    graph.add_to_class(keynodes.concept_repository, node)

    assert classify_downloadable(graph, keynodes, node) == DownloadableKind.REPOSITORY


def test_classify_links(graph, keynodes):
    github = graph.add_link("https://github.com/org/repo")
    graph.add_to_class(keynodes.concept_github_url, github)
    drive = graph.add_link("https://drive.google.com/drive/folders/abc")
    graph.add_to_class(keynodes.concept_google_drive_url, drive)
    plain = graph.add_link("https://example.com")

    assert classify_link(graph, keynodes, github) == LinkScheme.GITHUB
    assert classify_link(graph, keynodes, drive) == LinkScheme.GOOGLE_DRIVE
    assert classify_link(graph, keynodes, plain) == LinkScheme.UNCLASSIFIED


def test_membership_direction_matters(graph, keynodes):
    """Only arcs from the class to the node count."""
    node = graph.add_node("repo")
    graph.add_edge(node, graph.add_node(keynodes.concept_repository))

    assert classify_downloadable(graph, keynodes, node) == DownloadableKind.UNCLASSIFIED
