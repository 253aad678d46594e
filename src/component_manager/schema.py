"""Result models for downloads and installation metadata (immutable)."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import computed_field

from .classifier import DownloadableKind
from .classifier import LinkScheme
from .exceptions import ComponentError


class LinkStatus(str, Enum):
    """Outcome of processing one candidate address link."""

    FETCHED = "fetched"
    FAILED = "failed"
    NOT_IMPLEMENTED = "not_implemented"  # scheme recognized, no fetcher registered
    UNCLASSIFIED = "unclassified"


class LinkResult(BaseModel):
    """Outcome for a single address link."""

    model_config = ConfigDict(frozen=True)

    link: str
    scheme: LinkScheme
    status: LinkStatus
    source: str | None = None
    error: str | None = None


class DownloadReport(BaseModel):
    """
    Outcome of downloading one node.

    ``error`` holds the exception that aborted the download before any link
    was processed; per-link failures live in ``links``. Serialized reports
    carry ``error_type`` and ``error_message`` in place of the exception.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    node: str
    identifier: str | None = None
    kind: DownloadableKind = DownloadableKind.UNCLASSIFIED
    target_dir: Path | None = None
    links: list[LinkResult] = Field(default_factory=list)
    error: ComponentError | None = Field(default=None, exclude=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_type(self) -> str | None:
        """Class name of the aborting error, for serialized reports."""
        return type(self.error).__name__ if self.error is not None else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def error_message(self) -> str | None:
        """Message of the aborting error, for serialized reports."""
        return self.error.message if self.error is not None else None

    @property
    def succeeded(self) -> bool:
        """Check if no step failed (skipped links are not failures)."""
        if self.error is not None:
            return False
        return not any(r.status in (LinkStatus.FAILED, LinkStatus.UNCLASSIFIED) for r in self.links)

    @property
    def fetched_sources(self) -> list[str]:
        """Sources that were fetched successfully, in order."""
        return [r.source for r in self.links if r.status == LinkStatus.FETCHED and r.source]


class InstallMetadata(BaseModel):
    """Installation metadata of a component, read from the knowledge graph."""

    model_config = ConfigDict(frozen=True)

    component: str
    reusable: bool
    installation_method_valid: bool
    address: str = ""
    scripts: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)
