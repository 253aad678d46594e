"""Protocol downloaders.

Each fetcher implements ProtocolDownloaderProtocol for one URL scheme and is
registered with the downloader under its LinkScheme.
"""

import logging
import subprocess
from pathlib import Path

from .exceptions import FetchError

logger = logging.getLogger(__name__)

GITHUB_TRUNK = "trunk"


class GitHubSvnFetcher:
    """
    Fetch GitHub sources with ``svn export`` over GitHub's trunk path.

    ``svn export`` can fetch a single file or subdirectory of a repository
    without cloning it, which is what specification downloads need.

    Example:
        >>> fetcher = GitHubSvnFetcher()
        >>> source = fetcher.build_source("https://github.com/org/spec", "specification.scs")
        >>> source
        'https://github.com/org/spec/trunk/specification.scs'
        >>> fetcher.fetch(source, Path("/tmp/specs/spec"))
    """

    def __init__(self, svn_command: str = "svn", timeout: float | None = None):
        """Initialize fetcher.

        Args:
            svn_command: Subversion client executable
            timeout: Seconds before an export is abandoned (None waits forever)
        """
        self.svn_command = svn_command
        self.timeout = timeout

    def build_source(self, url: str, relative_path: str) -> str:
        """Compose trunk export locator: ``<url>/trunk/<relative_path>``."""
        return f"{url.rstrip('/')}/{GITHUB_TRUNK}/{relative_path}"

    def fetch(self, source: str, target_dir: Path) -> None:
        """
        Export source into target directory.

        Args:
            source: Export locator from build_source()
            target_dir: Existing directory to export into

        Raises:
            FetchError: If svn is missing, times out or exits non-zero
        """
        command = [self.svn_command, "export", "--force", "--non-interactive", source, str(target_dir)]
        context = {"source": source, "target_dir": str(target_dir)}

        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise FetchError(f"Subversion client not found: {self.svn_command}", context=context) from e
        except subprocess.TimeoutExpired as e:
            raise FetchError(f"Export of {source} timed out after {self.timeout}s", context=context) from e

        if result.returncode != 0:
            raise FetchError(
                f"Export of {source} failed (exit {result.returncode}): {result.stderr.strip()}",
                context={**context, "returncode": result.returncode},
            )

        logger.info(f"Exported {source} to {target_dir}")
