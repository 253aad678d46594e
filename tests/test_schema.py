"""Tests for download report and install metadata models."""

import json

import pytest
from component_manager import ComponentNotFoundError
from component_manager import DownloadReport
from component_manager import InstallMetadata
from component_manager import LinkResult
from component_manager import LinkScheme
from component_manager import LinkStatus
from pydantic import ValidationError


def _result(status, source=None):
    return LinkResult(link="link", scheme=LinkScheme.GITHUB, status=status, source=source)


def test_report_defaults():
    report = DownloadReport(node="node")

    assert report.links == []
    assert report.error is None
    assert report.succeeded
    assert report.fetched_sources == []


def test_report_with_error_not_succeeded():
    report = DownloadReport(node="node", error=ComponentNotFoundError("missing"))

    assert not report.succeeded


def test_not_implemented_is_not_failure():
    report = DownloadReport(node="node", links=[_result(LinkStatus.NOT_IMPLEMENTED)])

    assert report.succeeded


def test_fetched_sources_in_order():
    report = DownloadReport(
        node="node",
        links=[
            _result(LinkStatus.FETCHED, "https://a/trunk/"),
            _result(LinkStatus.FAILED, "https://b/trunk/"),
            _result(LinkStatus.FETCHED, "https://c/trunk/"),
        ],
    )

    assert report.fetched_sources == ["https://a/trunk/", "https://c/trunk/"]
    assert not report.succeeded


def test_report_frozen():
    report = DownloadReport(node="node")

    with pytest.raises(ValidationError):
        report.node = "other"  # type: ignore


def test_report_rejects_non_component_error():
    with pytest.raises(ValidationError):
        DownloadReport(node="node", error="boom")  # type: ignore


def test_install_metadata_defaults():
    metadata = InstallMetadata(component="c", reusable=False, installation_method_valid=False)

    assert metadata.address == ""
    assert metadata.scripts == []
    assert metadata.dependencies == []


def test_failed_report_serializes():
    """Aborting error is dumped as its type and message, not the exception."""
    report = DownloadReport(node="node", error=ComponentNotFoundError("No address found for repository"))

    data = json.loads(report.model_dump_json())

    assert "error" not in data
    assert data["error_type"] == "ComponentNotFoundError"
    assert data["error_message"] == "No address found for repository"


def test_successful_report_serializes():
    report = DownloadReport(node="node", links=[_result(LinkStatus.FETCHED, "https://a/trunk/")])

    data = report.model_dump()

    assert data["error_type"] is None
    assert data["error_message"] is None
    assert data["links"][0]["status"] == LinkStatus.FETCHED
