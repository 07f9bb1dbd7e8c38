"""stof-github - GitHub repositories as importable Stof formats.

GitHubLibrary lets a running document register repositories at runtime
(`GitHub.addFormat(owner, repo)`); GitHubFormat fetches files through the
contents API and re-dispatches them to the host's string importer by extension.
"""

from .arguments import FormatOption
from .arguments import HeaderOverrides
from .arguments import IdentifierOverride
from .arguments import coerce_option
from .config import load_format_configs
from .config import register_formats
from .exceptions import ConfigError
from .exceptions import FetchError
from .exceptions import GitHubFormatError
from .exceptions import ImportDelegationError
from .exceptions import MissingArgumentsError
from .exceptions import UnknownFunctionError
from .fetcher import GitHubFormat
from .host import InMemoryDocument
from .library import GitHubLibrary
from .library import add_format
from .protocols import FormatProtocol
from .protocols import HostDocumentProtocol
from .protocols import LibraryProtocol
from .registry import FormatRegistry
from .schema import DEFAULT_HEADERS
from .schema import FetcherConfig

__all__ = [
    # Library (registrar)
    "GitHubLibrary",
    "add_format",
    # Format (fetcher)
    "GitHubFormat",
    "FetcherConfig",
    "DEFAULT_HEADERS",
    # Option slots
    "FormatOption",
    "IdentifierOverride",
    "HeaderOverrides",
    "coerce_option",
    # Host seams
    "FormatProtocol",
    "LibraryProtocol",
    "HostDocumentProtocol",
    "FormatRegistry",
    "InMemoryDocument",
    # Configuration
    "load_format_configs",
    "register_formats",
    # Exceptions
    "GitHubFormatError",
    "MissingArgumentsError",
    "UnknownFunctionError",
    "FetchError",
    "ImportDelegationError",
    "ConfigError",
]

__version__ = "0.1.0"
