"""Component downloader - Classify, resolve and fetch components.

Download flow for one node:
1. Classify node (repository or reusable component specification)
2. Create <download_dir>/<system identifier>, which must stay inside download_dir
3. Resolve candidate address links (specification mirrors or the single
   repository link)
4. Classify each link's scheme and hand it to the registered fetcher

Failures in steps 1-3 abort the node and are reported, not raised. Each link
in step 4 succeeds or fails on its own; every fetchable link is downloaded
into the same directory (last write wins).
"""

import logging
from pathlib import Path

from .classifier import DownloadableKind
from .classifier import LinkScheme
from .classifier import classify_downloadable
from .classifier import classify_link
from .exceptions import ClassificationError
from .exceptions import ComponentError
from .exceptions import ComponentNotFoundError
from .exceptions import DownloadDirectoryError
from .exceptions import FetchError
from .fetchers import GitHubSvnFetcher
from .keynodes import Keynodes
from .protocols import GraphQueryProtocol
from .protocols import Node
from .protocols import ProtocolDownloaderProtocol
from .resolver import AddressResolver
from .schema import DownloadReport
from .schema import LinkResult
from .schema import LinkStatus

logger = logging.getLogger(__name__)

SPECIFICATION_FILENAME = "specification.scs"


def default_fetchers() -> dict[LinkScheme, ProtocolDownloaderProtocol]:
    """Fetchers registered when the app provides none (GitHub only)."""
    return {LinkScheme.GITHUB: GitHubSvnFetcher()}


class ComponentDownloader:
    """
    Download repositories and reusable component specifications.

    Apps inject the graph, keynodes and fetchers (one per LinkScheme).
    Schemes without a registered fetcher are recognized but skipped.

    Example:
        >>> downloader = ComponentDownloader(graph, Keynodes.from_graph(graph))
        >>> report = downloader.download("part_ui_specification", Path("/var/components"))
        >>> report.fetched_sources
        ['https://github.com/org/part-ui/trunk/specification.scs']
    """

    def __init__(
        self,
        graph: GraphQueryProtocol,
        keynodes: Keynodes,
        fetchers: dict[LinkScheme, ProtocolDownloaderProtocol] | None = None,
    ):
        """Initialize downloader.

        Args:
            graph: Knowledge graph to resolve nodes in
            keynodes: Class and relation nodes bound for this graph
            fetchers: Fetcher per scheme (defaults to default_fetchers())
        """
        self.graph = graph
        self.keynodes = keynodes
        self.fetchers = dict(fetchers) if fetchers is not None else default_fetchers()
        self.address_resolver = AddressResolver(graph, keynodes)

    def fetcher_for(self, scheme: LinkScheme) -> ProtocolDownloaderProtocol | None:
        """Get fetcher registered for scheme, or None if not implemented."""
        return self.fetchers.get(scheme)

    def download(self, node: Node, download_dir: Path) -> DownloadReport:
        """
        Download node into ``download_dir / <system identifier>``.

        Args:
            node: Repository or reusable component specification node
            download_dir: Root directory for downloads (app policy)

        Returns:
            DownloadReport; ``error`` is set when the node was aborted
        """
        kind = classify_downloadable(self.graph, self.keynodes, node)
        if kind == DownloadableKind.UNCLASSIFIED:
            error = ClassificationError(f"Can't download {node}: downloadable class not found", context={"node": node})
            logger.error(error.message)
            return DownloadReport(node=node, kind=kind, error=error)

        identifier = self.graph.get_system_identifier(node)
        if not identifier:
            error = ComponentNotFoundError(f"Can't download {node}: no system identifier", context={"node": node})
            logger.error(error.message)
            return DownloadReport(node=node, kind=kind, error=error)

        target_dir = download_dir / identifier
        if download_dir.resolve() not in target_dir.resolve().parents:
            error = DownloadDirectoryError(
                f"Can't download {identifier}: {target_dir} is outside {download_dir}",
                context={"node": node, "target_dir": str(target_dir)},
            )
            logger.error(error.message)
            return DownloadReport(node=node, identifier=identifier, kind=kind, error=error)

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error = DownloadDirectoryError(
                f"Can't download {identifier}: can't create {target_dir}: {e}",
                context={"node": node, "target_dir": str(target_dir)},
            )
            logger.error(error.message)
            return DownloadReport(node=node, identifier=identifier, kind=kind, error=error)

        try:
            links, relative_path = self._resolve_links(node, kind)
        except ComponentError as e:
            logger.error(f"Can't download {identifier}: address resolution failed: {e.message}")
            return DownloadReport(node=node, identifier=identifier, kind=kind, target_dir=target_dir, error=e)

        logger.info(f"Downloading {kind.value} {identifier} to {target_dir} ({len(links)} link(s))")
        results = [self._download_link(link, relative_path, target_dir) for link in links]

        report = DownloadReport(node=node, identifier=identifier, kind=kind, target_dir=target_dir, links=results)

        logger.info(f"Finished {identifier}: {len(report.fetched_sources)} of {len(results)} link(s) fetched")
        return report

    def _resolve_links(self, node: Node, kind: DownloadableKind) -> tuple[list[Node], str]:
        """Get candidate links and the path to fetch inside each of them."""
        if kind == DownloadableKind.REUSABLE_COMPONENT_SPECIFICATION:
            return self.address_resolver.get_specification_address(node), SPECIFICATION_FILENAME
        return [self.address_resolver.get_repository_address(node)], ""

    def _download_link(self, link: Node, relative_path: str, target_dir: Path) -> LinkResult:
        """Fetch one link with the fetcher registered for its scheme."""
        scheme = classify_link(self.graph, self.keynodes, link)
        if scheme == LinkScheme.UNCLASSIFIED:
            message = f"Link {link} has no supported URL class"
            logger.error(message)
            return LinkResult(link=link, scheme=scheme, status=LinkStatus.UNCLASSIFIED, error=message)

        fetcher = self.fetcher_for(scheme)
        if fetcher is None:
            logger.info(f"Skipping link {link}: no downloader for {scheme.value} links")
            return LinkResult(link=link, scheme=scheme, status=LinkStatus.NOT_IMPLEMENTED)

        url = self.graph.get_link_content(link)
        if not url:
            message = f"Link {link} has no content"
            logger.error(message)
            return LinkResult(link=link, scheme=scheme, status=LinkStatus.FAILED, error=message)

        source = fetcher.build_source(url, relative_path)
        logger.debug(f"Fetching {source} into {target_dir}")
        try:
            fetcher.fetch(source, target_dir)
        except FetchError as e:
            logger.error(f"Failed to fetch {source}: {e.message}")
            return LinkResult(link=link, scheme=scheme, status=LinkStatus.FAILED, source=source, error=e.message)

        return LinkResult(link=link, scheme=scheme, status=LinkStatus.FETCHED, source=source)
