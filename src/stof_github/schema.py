"""Fetcher configuration schema.

One immutable config per registered repository format. Default headers are
seeded here so every construction path (library call, TOML config, direct
embedding) ends up with the same header set.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

FORMAT_PREFIX = "github:"

# Raw media type makes the contents API return the file itself instead of a
# base64 JSON envelope.
DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/vnd.github.raw+json",
    "X-GitHub-Api-Version": "2022-11-28",
}


class FetcherConfig(BaseModel):
    """
    Configuration for one repository-backed format.

    Identifier defaults to the repository name, so `repo="stof"` answers to the
    format `github:stof`; an explicit empty identifier is kept as given.
    Supplied headers are merged over DEFAULT_HEADERS and exposed read-only.
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    identifier: str
    headers: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType(dict(DEFAULT_HEADERS)))

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("identifier") is None:
            data["identifier"] = data.get("repo")
        data["headers"] = {**DEFAULT_HEADERS, **(data.get("headers") or {})}
        return data

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(cls, headers: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(headers))

    @property
    def format_identifier(self) -> str:
        """Registry key, e.g. "github:stof"."""
        return f"{FORMAT_PREFIX}{self.identifier}"

    def with_overrides(
        self,
        identifier: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> "FetcherConfig":
        """
        Return a copy with a new identifier and/or extra headers.

        Args:
            identifier: Replacement identifier (None keeps the current one)
            headers: Headers merged over the current ones (later wins)

        Returns:
            New FetcherConfig; self is left untouched
        """
        return FetcherConfig(
            owner=self.owner,
            repo=self.repo,
            identifier=self.identifier if identifier is None else identifier,
            headers={**self.headers, **(headers or {})},
        )
