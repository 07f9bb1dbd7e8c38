"""GitHub library - register repositories as formats from a running document.

Scripts call:

    GitHub.addFormat(owner: str, repo: str, repo_id?: str, headers?: vec)

Best used in an init block so the format exists before the import statements
that follow it are parsed. The format becomes available in every scope of the
document.
"""

import logging
from typing import Any

import requests

from .arguments import apply_options
from .exceptions import MissingArgumentsError
from .exceptions import UnknownFunctionError
from .fetcher import GitHubFormat
from .protocols import HostDocumentProtocol

logger = logging.getLogger(__name__)

ADD_FORMAT_USAGE = (
    "GitHub.addFormat requires at least 2 parameters: "
    "GitHub.addFormat(owner: str, repo: str, repo_id?: str, headers?: vec)"
)


def add_format(
    doc: HostDocumentProtocol,
    owner: str,
    repo: str,
    *options: Any,
    session: requests.Session | None = None,
) -> GitHubFormat:
    """
    Create a GitHub format and load it into `doc`.

    Args:
        doc: Host document receiving the format
        owner: Repository owner
        repo: Repository name (also the default identifier)
        *options: Up to two IdentifierOverride/HeaderOverrides values, or raw
                  script values (str id, list of (key, value) tuples).
                  Unrecognized values are ignored.
        session: Optional shared HTTP session

    Returns:
        The loaded format

    Example:
        >>> fmt = add_format(doc, "dev-formata-io", "stof", IdentifierOverride("formata"))
        >>> fmt.format_identifier()
        'github:formata'
    """
    identifier, headers = apply_options(repo, list(options))
    format = GitHubFormat(owner=owner, repo=repo, identifier=identifier, headers=headers, session=session)
    doc.load_format(format)
    logger.info(f"Added format '{format.format_identifier()}' for {owner}/{repo}")
    return format


class GitHubLibrary:
    """
    Stof library exposing GitHub functions under the "GitHub" scope.

    Every format registered through one library instance reuses a single HTTP
    session, so re-registering an identifier does not leave a connection pool
    behind.
    """

    def __init__(self, session: requests.Session | None = None):
        """Initialize the library.

        Args:
            session: Session shared by every format this library creates
                     (default: one new session owned by the library)
        """
        self.session = session if session is not None else requests.Session()

    def scope(self) -> str:
        return "GitHub"

    def call(self, pid: str, doc: HostDocumentProtocol, name: str, parameters: list[Any]) -> None:
        """
        Execute a GitHub library function.

        Args:
            pid: Host process id
            doc: Host document
            name: Function name
            parameters: Script arguments

        Raises:
            MissingArgumentsError: addFormat called with fewer than 2 parameters
            UnknownFunctionError: Unknown function name
        """
        if name == "addFormat":
            return self.add_format(doc, parameters)
        raise UnknownFunctionError(
            f"Could not execute '{name}' in the GitHub library",
            context={"scope": self.scope(), "name": name},
        )

    def add_format(self, doc: HostDocumentProtocol, parameters: list[Any]) -> None:
        """GitHub.addFormat(owner, repo, [id-or-headers], [id-or-headers])."""
        if len(parameters) < 2:
            raise MissingArgumentsError(ADD_FORMAT_USAGE, context={"received": len(parameters)})

        owner = str(parameters[0])
        repo = str(parameters[1])
        add_format(doc, owner, repo, *parameters[2:4], session=self.session)
