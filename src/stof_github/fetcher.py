"""GitHub repository format.

Fetches a file through the repository contents API and hands the raw text to
the host's string importer, selected by the file extension. From the host's
side a remote file becomes indistinguishable from a local file of that type.

Endpoint used:
- GET https://api.github.com/repos/{owner}/{repo}/contents/{path}

Single attempt per fetch: no retry, no cache. Retry policy belongs to the
caller.
"""

import logging

import requests

from .exceptions import FetchError
from .protocols import HostDocumentProtocol
from .schema import FetcherConfig

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.github.com"

# (connect, read) seconds
REQUEST_TIMEOUT = (3, 3)


class GitHubFormat:
    """
    Stof format backed by one GitHub repository.

    With identifier "formata" the format is used as:

        import github:formata "myfile.stof" as Import;

    Config is immutable after construction and the session is reusable, so
    concurrent fetches on one instance need no locking.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        identifier: str | None = None,
        headers: dict[str, str] | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the format.

        Args:
            owner: Repository owner or organization
            repo: Repository name
            identifier: Format id override (default: repo)
            headers: Extra headers, merged over the default Accept/API-version pair
            session: Optional shared session (default: a new one per format)
        """
        self.config = FetcherConfig(owner=owner, repo=repo, identifier=identifier, headers=headers or {})
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: FetcherConfig, session: requests.Session | None = None) -> "GitHubFormat":
        """Create a format from an existing config."""
        return cls(
            owner=config.owner,
            repo=config.repo,
            identifier=config.identifier,
            headers=dict(config.headers),
            session=session,
        )

    @property
    def owner(self) -> str:
        return self.config.owner

    @property
    def repo(self) -> str:
        return self.config.repo

    @property
    def identifier(self) -> str:
        return self.config.identifier

    @property
    def headers(self) -> dict[str, str]:
        return dict(self.config.headers)

    def format_identifier(self) -> str:
        """How this format is addressed in import statements, e.g. "github:stof"."""
        return self.config.format_identifier

    def build_url(self, path: str) -> str:
        """Contents API URL for `path`. The path is used as given (no escaping)."""
        return f"{API_BASE_URL}/repos/{self.owner}/{self.repo}/contents/{path}"

    def fetch_raw(self, path: str) -> str:
        """
        Get the text of a file in this repository.

        Args:
            path: Path relative to the repository root (e.g. "web/deno.json")

        Returns:
            File contents decoded as UTF-8

        Raises:
            FetchError: On transport failure, non-success status, or undecodable body
        """
        url = self.build_url(path)
        context = {"url": url, "path": path, "format": self.format_identifier()}
        logger.debug(f"Fetching {url}")

        try:
            response = self.session.get(url, headers=self.headers, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status = getattr(getattr(e, "response", None), "status_code", None)
            if status is not None:
                context["status"] = status
            logger.error(f"Failed to fetch {path} from {self.owner}/{self.repo}: {e}")
            raise FetchError(f"Failed to fetch '{path}' from {self.owner}/{self.repo}: {e}", context=context) from e

        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"Response for {url} is not valid UTF-8: {e}")
            raise FetchError(f"Contents of '{path}' are not valid UTF-8 text", context=context) from e

    def file_import(
        self,
        pid: str,
        doc: HostDocumentProtocol,
        format: str,
        full_path: str,
        extension: str,
        as_name: str,
    ) -> None:
        """
        Fetch `full_path` and import it into `doc` as a string of type `extension`.

        The declared `format` is ignored. Errors raised by the host's string
        import (unknown extension, parse failure) propagate unchanged.
        """
        contents = self.fetch_raw(full_path)
        doc.string_import(pid, extension, contents, as_name)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "GitHubFormat":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GitHubFormat({self.format_identifier()!r}, owner={self.owner!r}, repo={self.repo!r})"
