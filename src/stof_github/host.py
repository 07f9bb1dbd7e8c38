"""Minimal in-memory host document.

Real deployments load GitHubLibrary and GitHubFormat into the Stof engine. This
host implements just enough of the engine's surface (format registry, library
calls, string import by extension) for embedding code and tests to drive the
adapter end to end.
"""

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import PurePosixPath
from typing import Any

from .exceptions import ImportDelegationError
from .exceptions import UnknownFunctionError
from .protocols import FormatProtocol
from .protocols import LibraryProtocol
from .registry import FormatRegistry

logger = logging.getLogger(__name__)

ROOT_BINDING = "root"

StringImporter = Callable[[str], Any]


def _default_string_importers() -> dict[str, StringImporter]:
    return {
        "json": json.loads,
        "toml": tomllib.loads,
        "txt": str,
        "text": str,
        "md": str,
    }


class InMemoryDocument:
    """
    Host document keeping imported values in a plain `bindings` dict.

    Imports into the root (empty binding name or "root") merge mapping values
    and reject anything else; all other values are stored under their binding
    name, so the root binding is always a dict.
    """

    def __init__(self, formats: FormatRegistry | None = None):
        """Initialize the document.

        Args:
            formats: Optional registry to share between documents
        """
        self.formats = formats if formats is not None else FormatRegistry()
        self.libraries: dict[str, LibraryProtocol] = {}
        self.string_importers: dict[str, StringImporter] = _default_string_importers()
        self.bindings: dict[str, Any] = {ROOT_BINDING: {}}

    def load_format(self, format: FormatProtocol) -> None:
        self.formats.register(format)

    def load_lib(self, library: LibraryProtocol) -> None:
        self.libraries[library.scope()] = library
        logger.debug(f"Loaded library '{library.scope()}'")

    def add_string_importer(self, extension: str, importer: StringImporter) -> None:
        """Register (or replace) the string importer for an extension."""
        self.string_importers[extension] = importer

    def call(self, pid: str, path: str, parameters: list[Any]) -> Any:
        """
        Call a library function by dotted path, e.g. "GitHub.addFormat".

        Raises:
            UnknownFunctionError: Malformed path or no library loaded for the scope
        """
        scope, _, name = path.partition(".")
        library = self.libraries.get(scope)
        if library is None or not name:
            raise UnknownFunctionError(f"No library function '{path}'", context={"path": path})
        return library.call(pid, self, name, parameters)

    def string_import(self, pid: str, extension: str, contents: str, as_name: str) -> None:
        """
        Parse `contents` with the importer for `extension` and bind the result.

        Raises:
            ImportDelegationError: Unknown extension, parse failure, or a
                non-mapping value imported into the root
        """
        importer = self.string_importers.get(extension)
        if importer is None:
            raise ImportDelegationError(
                f"No format available to import '{extension}' content",
                context={"extension": extension, "as_name": as_name},
            )

        try:
            value = importer(contents)
        except Exception as e:
            raise ImportDelegationError(
                f"Failed to import '{extension}' content: {e}",
                context={"extension": extension, "as_name": as_name},
            ) from e

        target = as_name or ROOT_BINDING
        if target == ROOT_BINDING:
            if not isinstance(value, dict):
                raise ImportDelegationError(
                    f"Cannot import '{extension}' content into the root without a binding name",
                    context={"extension": extension, "as_name": as_name},
                )
            self.bindings[ROOT_BINDING].update(value)
        else:
            self.bindings[target] = value
        logger.debug(f"[{pid}] Imported {extension} content into '{target}'")

    def file_import(self, pid: str, format: str, full_path: str, as_name: str = "") -> None:
        """
        Dispatch `import <format> "<full_path>" as <as_name>;` to a registered format.

        Raises:
            ImportDelegationError: No format registered under `format`
        """
        handler = self.formats.get(format)
        if handler is None:
            raise ImportDelegationError(
                f"Format '{format}' is not loaded",
                context={"format": format, "path": full_path},
            )
        extension = PurePosixPath(full_path).suffix.lstrip(".")
        handler.file_import(pid, self, format, full_path, extension, as_name)
