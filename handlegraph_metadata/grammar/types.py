"""Enumerations for the path-name grammar."""

from __future__ import annotations

from enum import StrEnum


class Sense(StrEnum):
    """What a path is meant to be representing. Each path has exactly one."""

    GENERIC = "generic"
    REFERENCE = "reference"
    HAPLOTYPE = "haplotype"


__all__ = ["Sense"]
