"""Component manager exceptions.

Resolution errors are raised by the resolvers and reported (not raised) by
the downloader, so a single bad node never takes the caller down.
"""


class ComponentError(Exception):
    """Base exception for component operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (node ids, paths, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ClassificationError(ComponentError):
    """Node or link does not belong to any supported class."""


class ComponentNotFoundError(ComponentError):
    """Expected relation, link or keynode is absent from the graph."""


class InvalidComponentStateError(ComponentError):
    """Relation exists but its target is structurally invalid (e.g. an empty set)."""


class DownloadDirectoryError(ComponentError):
    """Download directory could not be created."""


class FetchError(ComponentError):
    """Protocol downloader failed to fetch a source."""
