"""Format registry - identifier to format mapping owned by a host document.

Single shared mutable structure in the package. All access goes through one
lock; registration is a single insert-or-replace.
"""

import logging
import threading

from .protocols import FormatProtocol

logger = logging.getLogger(__name__)


class FormatRegistry:
    """
    Thread-safe mapping of format identifiers (e.g. "github:stof") to formats.

    Registering an identifier that already exists replaces the earlier format;
    later imports use the latest one.
    """

    def __init__(self):
        self._formats: dict[str, FormatProtocol] = {}
        self._lock = threading.Lock()

    def register(self, format: FormatProtocol) -> FormatProtocol | None:
        """
        Insert or replace a format under its identifier.

        Args:
            format: Format to install

        Returns:
            The format previously registered under the same identifier, if any
        """
        identifier = format.format_identifier()
        with self._lock:
            previous = self._formats.get(identifier)
            self._formats[identifier] = format

        if previous is not None:
            logger.warning(f"Format '{identifier}' replaced by a new registration")
        else:
            logger.debug(f"Registered format '{identifier}'")
        return previous

    def unregister(self, identifier: str) -> bool:
        """Remove a format. Returns True if it was registered."""
        with self._lock:
            removed = self._formats.pop(identifier, None)
        if removed is not None:
            logger.debug(f"Unregistered format '{identifier}'")
        return removed is not None

    def get(self, identifier: str) -> FormatProtocol | None:
        with self._lock:
            return self._formats.get(identifier)

    def identifiers(self) -> list[str]:
        """Registered identifiers, sorted."""
        with self._lock:
            return sorted(self._formats)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._formats

    def __len__(self) -> int:
        with self._lock:
            return len(self._formats)
