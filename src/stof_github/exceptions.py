"""GitHub format exceptions.

Clear, actionable messages. Context dicts carry the owner/repo/path details.
"""


class GitHubFormatError(Exception):
    """Base exception for GitHub format operations."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (url, path, status, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class MissingArgumentsError(GitHubFormatError):
    """A library function was called with too few arguments."""


class UnknownFunctionError(GitHubFormatError):
    """A library function or library scope does not exist."""


class FetchError(GitHubFormatError):
    """Fetching a file from the repository contents API failed."""


class ImportDelegationError(GitHubFormatError):
    """The host could not import fetched content (unknown extension, parse failure)."""


class ConfigError(GitHubFormatError):
    """Invalid format configuration file."""
