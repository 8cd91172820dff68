"""Static helpers for path-name parsing and composition.

These functions work on plain dicts of present fields. Profile validation
lives on the Pydantic model; ``parse_path_name`` never raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, TypeVar

from handlegraph_metadata.grammar.constants import (
    INT64_MAX,
    RANGE_END_SEPARATOR,
    RANGE_START_SEPARATOR,
    RANGE_TERMINATOR,
    RESERVED_CHARACTERS,
    SEPARATOR,
)
from handlegraph_metadata.grammar.types import Sense

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"[0-9]+")
RANGE_PATTERN = re.compile(
    rf"(?P<start>[0-9]+)(?:{re.escape(RANGE_END_SEPARATOR)}(?P<end>[0-9]+))?"
)


E = TypeVar("E")


def coerce_enum(enum_cls: type[E], value: E | str | None) -> E | None:
    """Coerce a possibly-string value to an enum member.

    Accepts the enum member already, or its .value string. Returns None when
    value is None. Raises ValueError if the string doesn't match an allowed
    member.

    Example:
        >>> coerce_enum(Sense, "haplotype")
        <Sense.HAPLOTYPE: 'haplotype'>
    """
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)  # type: ignore[call-arg]
        except ValueError as e:
            allowed = [e.value for e in enum_cls]  # type: ignore[attr-defined]
            raise ValueError(
                f"Invalid {enum_cls.__name__} token '{value}'. "
                f"Allowed values: {allowed}"
            ) from e
    raise TypeError(
        f"Expected {enum_cls.__name__}, str, or None; got {type(value).__name__}"
    )


def is_component(text: str) -> bool:
    """True when ``text`` can stand as a single name component."""
    return bool(text) and not any(char in text for char in RESERVED_CHARACTERS)


def _to_int64(text: str) -> int | None:
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    number = int(text)
    return number if number <= INT64_MAX else None


def _split_range(name: str) -> tuple[str, tuple[int, int | None] | None] | None:
    """Split a trailing ``[start]`` or ``[start-end]`` off ``name``.

    Returns ``(body, subrange)``, or None when a range is present but malformed.
    """
    if not name.endswith(RANGE_TERMINATOR):
        return name, None
    opening = name.rfind(RANGE_START_SEPARATOR)
    if opening < 0:
        # A lone terminator is ordinary component text.
        return name, None
    match = RANGE_PATTERN.fullmatch(name[opening + 1 : -1])
    if match is None:
        return None
    start = _to_int64(match["start"])
    if start is None:
        return None
    end = None
    if match["end"] is not None:
        end = _to_int64(match["end"])
        if end is None:
            return None
    return name[:opening], (start, end)


def _fallback(name: str, reason: str) -> dict[str, Any]:
    logger.debug("Path name %r is not structured (%s); treating as generic", name, reason)
    values: dict[str, Any] = {"sense": Sense.GENERIC}
    if name:
        values["locus"] = name
    return values


def parse_path_name(name: str) -> dict[str, Any]:
    """Parse a path name into a dict of its present fields.

    Always includes ``sense``. Names that do not follow the structured format
    come back as a generic path whose locus is the whole name.
    """
    split = _split_range(name)
    if split is None:
        return _fallback(name, "malformed range")
    body, subrange = split

    components = body.split(SEPARATOR)
    if len(components) > 4:
        return _fallback(name, "too many components")
    if not all(is_component(component) for component in components):
        return _fallback(name, "empty or reserved component")

    values: dict[str, Any] = {}
    if len(components) == 1:
        values["locus"] = components[0]
    elif len(components) == 2:
        values["sample"], values["locus"] = components
    else:
        haplotype = _to_int64(components[1])
        if haplotype is None:
            return _fallback(name, "haplotype is not a number")
        values["sample"] = components[0]
        values["haplotype"] = haplotype
        values["locus"] = components[2]
        if len(components) == 4:
            phase_block = _to_int64(components[3])
            if phase_block is None:
                return _fallback(name, "phase block is not a number")
            values["phase_block"] = phase_block

    # Any structured name is a reference unless it carries a phase block;
    # only the unstructured fallback is generic.
    values["sense"] = Sense.HAPLOTYPE if "phase_block" in values else Sense.REFERENCE

    if subrange is not None:
        values["subrange"] = subrange
    return values


def compose_path_name(parts: Mapping[str, Any]) -> str:
    """Compose a path name from its present fields.

    Callers validate inputs upstream; ``sense`` is ignored here since the
    rendered form depends only on which fields are present.
    """
    tokens: list[str] = []
    sample = parts.get("sample")
    if sample:
        tokens.append(sample)
    haplotype = parts.get("haplotype")
    if haplotype is not None:
        tokens.append(str(haplotype))
    tokens.append(parts["locus"])
    phase_block = parts.get("phase_block")
    if phase_block is not None:
        tokens.append(str(phase_block))
    rendered = SEPARATOR.join(tokens)

    subrange = parts.get("subrange")
    if subrange is not None:
        start, end = subrange
        bounds = str(start)
        if end is not None:
            bounds += f"{RANGE_END_SEPARATOR}{end}"
        rendered += f"{RANGE_START_SEPARATOR}{bounds}{RANGE_TERMINATOR}"
    return rendered


__all__ = [
    "coerce_enum",
    "compose_path_name",
    "is_component",
    "parse_path_name",
]
