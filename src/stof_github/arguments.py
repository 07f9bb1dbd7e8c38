"""Optional argument slots for `GitHub.addFormat`.

Scripts pass the third and fourth arguments as either an identifier string or
a list of (header, value) tuples. Python callers use the tagged union directly;
script values go through `coerce_option`, which drops anything it does not
recognize instead of failing.
"""

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentifierOverride:
    """Use `identifier` instead of the repository name (format becomes github:<identifier>)."""

    identifier: str


@dataclass(frozen=True)
class HeaderOverrides:
    """Extra request headers, applied in order (later entries win)."""

    headers: tuple[tuple[str, str], ...] = ()


FormatOption = IdentifierOverride | HeaderOverrides


def coerce_option(value: Any) -> FormatOption | None:
    """
    Interpret a script value passed in an optional addFormat slot.

    Rules:
    - str -> IdentifierOverride
    - list -> HeaderOverrides from its 2-element tuple items (other items skipped)
    - FormatOption instances pass through
    - anything else -> None (ignored by the caller)

    Args:
        value: Raw value from the script call

    Returns:
        FormatOption, or None if the shape is not recognized

    Example:
        >>> coerce_option("formata")
        IdentifierOverride(identifier='formata')
        >>> coerce_option([("Authorization", "Bearer x"), "junk"])
        HeaderOverrides(headers=(('Authorization', 'Bearer x'),))
    """
    if isinstance(value, (IdentifierOverride, HeaderOverrides)):
        return value

    if isinstance(value, str):
        return IdentifierOverride(value)

    if isinstance(value, list):
        pairs = tuple((str(item[0]), str(item[1])) for item in value if isinstance(item, tuple) and len(item) == 2)
        return HeaderOverrides(pairs)

    logger.debug(f"Ignoring unrecognized addFormat option of type {type(value).__name__}")
    return None


def apply_options(repo: str, options: list[Any]) -> tuple[str, dict[str, str]]:
    """
    Fold optional slots into an identifier and a header map.

    Args:
        repo: Repository name, the default identifier
        options: Raw or typed option values in call order

    Returns:
        (identifier, headers) with later headers overwriting earlier ones
    """
    identifier = repo
    headers: dict[str, str] = {}

    for value in options:
        option = coerce_option(value)
        if isinstance(option, IdentifierOverride):
            identifier = option.identifier
        elif isinstance(option, HeaderOverrides):
            for key, header_value in option.headers:
                headers[key] = header_value

    return identifier, headers
