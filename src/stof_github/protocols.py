"""Protocols for the host document extension points.

The host engine owns parsing and import dispatch. This package only needs the
three seams below: a format (importable by identifier), a library (callable
from scripts), and the host document both are loaded into.
"""

from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class FormatProtocol(Protocol):
    """A named importer the host dispatches `import <format> "<path>"` statements to."""

    def format_identifier(self) -> str:
        """Identifier this format is registered and looked up under."""
        ...

    def file_import(
        self,
        pid: str,
        doc: "HostDocumentProtocol",
        format: str,
        full_path: str,
        extension: str,
        as_name: str,
    ) -> None:
        """Import the file at `full_path` into `doc` under `as_name`.

        Args:
            pid: Host process id the import runs in
            doc: Host document receiving the import
            format: Format string as declared in the import statement
            full_path: Path of the file being imported
            extension: File extension, selects the host's string importer
            as_name: Binding name ("" imports into the root)

        Raises:
            Exception: If the file cannot be read or imported
        """
        ...


@runtime_checkable
class LibraryProtocol(Protocol):
    """A named set of functions exposed into the host's scripting namespace."""

    def scope(self) -> str:
        """Name scripts use to reach this library (e.g. "GitHub")."""
        ...

    def call(self, pid: str, doc: "HostDocumentProtocol", name: str, parameters: list[Any]) -> Any:
        """Execute library function `name` with script-provided parameters."""
        ...


@runtime_checkable
class HostDocumentProtocol(Protocol):
    """The parts of the host document this package calls into."""

    def load_format(self, format: FormatProtocol) -> None:
        """Insert or replace a format by its identifier."""
        ...

    def string_import(self, pid: str, extension: str, contents: str, as_name: str) -> None:
        """Import `contents` using the host's importer for `extension`."""
        ...
