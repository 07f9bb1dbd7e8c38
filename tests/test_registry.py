"""Tests for FormatRegistry."""

import threading

from stof_github import FormatProtocol
from stof_github import FormatRegistry
from stof_github import GitHubFormat


class StubFormat:
    """Minimal format for registry tests."""

    def __init__(self, identifier: str):
        self.identifier = identifier

    def format_identifier(self) -> str:
        return self.identifier

    def file_import(self, pid, doc, format, full_path, extension, as_name) -> None:
        pass


def test_stub_satisfies_protocol():
    assert isinstance(StubFormat("x"), FormatProtocol)


def test_github_format_satisfies_protocol(session):
    assert isinstance(GitHubFormat("o", "r", session=session), FormatProtocol)


def test_register_and_get():
    registry = FormatRegistry()
    fmt = StubFormat("github:stof")

    previous = registry.register(fmt)

    assert previous is None
    assert registry.get("github:stof") is fmt
    assert "github:stof" in registry
    assert len(registry) == 1


def test_register_replaces_existing():
    registry = FormatRegistry()
    first = StubFormat("github:stof")
    second = StubFormat("github:stof")

    registry.register(first)
    previous = registry.register(second)

    assert previous is first
    assert registry.get("github:stof") is second
    assert len(registry) == 1


def test_identifiers_are_exact():
    registry = FormatRegistry()
    registry.register(StubFormat("github:Stof"))

    assert registry.get("github:stof") is None
    assert registry.get("github:Stof") is not None


def test_unregister():
    registry = FormatRegistry()
    registry.register(StubFormat("github:a"))

    assert registry.unregister("github:a") is True
    assert registry.unregister("github:a") is False
    assert registry.get("github:a") is None


def test_identifiers_sorted():
    registry = FormatRegistry()
    for identifier in ["github:c", "github:a", "github:b"]:
        registry.register(StubFormat(identifier))

    assert registry.identifiers() == ["github:a", "github:b", "github:c"]


def test_concurrent_registration():
    """Concurrent writers leave exactly one entry per identifier."""
    registry = FormatRegistry()

    def worker(n: int) -> None:
        for i in range(50):
            registry.register(StubFormat(f"github:{i % 10}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) == 10
