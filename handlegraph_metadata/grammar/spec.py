"""Load and normalize the packaged path-name grammar specification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from importlib import resources
from typing import Any

import yaml

_GRAMMAR_PACKAGE = "handlegraph_metadata.grammar"
_GRAMMAR_FILENAME = "specification.yml"

FIELDS = ("sample", "locus", "haplotype", "phase_block", "subrange")
REQUIREMENTS = ("required", "forbidden", "optional")


@dataclass(frozen=True)
class Separators:
    component: str
    range_start: str
    range_end: str
    range_terminator: str


@dataclass(frozen=True)
class Sentinels:
    no_sample_name: str
    no_locus_name: str
    no_haplotype: int
    no_phase_block: int
    no_end_position: int


@dataclass(frozen=True)
class SenseProfile:
    identifier: str
    description: str
    fields: dict[str, str]

    def required(self) -> tuple[str, ...]:
        return tuple(f for f in FIELDS if self.fields[f] == "required")

    def forbidden(self) -> tuple[str, ...]:
        return tuple(f for f in FIELDS if self.fields[f] == "forbidden")


@dataclass(frozen=True)
class GrammarSpec:
    separators: Separators
    sentinels: Sentinels
    senses: tuple[SenseProfile, ...]

    @property
    def sense_map(self) -> dict[str, SenseProfile]:
        return {profile.identifier: profile for profile in self.senses}

    @classmethod
    def load(cls) -> GrammarSpec:
        return _load_cached()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GrammarSpec:
        separators = Separators(**data["separators"])
        for name, value in vars(separators).items():
            if len(value) != 1:
                raise ValueError(f"Separator '{name}' must be a single character")

        sentinels = Sentinels(**data["sentinels"])

        senses: list[SenseProfile] = []
        for identifier, entry in (data.get("senses") or {}).items():
            fields = dict(entry.get("fields") or {})
            missing = [f for f in FIELDS if f not in fields]
            if missing:
                raise ValueError(
                    f"Sense '{identifier}' does not declare fields: {missing}"
                )
            unknown = sorted(set(fields) - set(FIELDS))
            if unknown:
                raise ValueError(f"Sense '{identifier}' declares unknown fields: {unknown}")
            for field, requirement in fields.items():
                if requirement not in REQUIREMENTS:
                    raise ValueError(
                        f"Sense '{identifier}' field '{field}' has invalid "
                        f"requirement '{requirement}'"
                    )
            senses.append(
                SenseProfile(
                    identifier=identifier,
                    description=str(entry.get("description", "")).strip(),
                    fields=fields,
                )
            )
        return cls(separators=separators, sentinels=sentinels, senses=tuple(senses))


@cache
def _load_cached() -> GrammarSpec:
    grammar_path = resources.files(_GRAMMAR_PACKAGE) / _GRAMMAR_FILENAME
    with grammar_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return GrammarSpec.from_mapping(data)


__all__ = ["FIELDS", "GrammarSpec", "SenseProfile", "Sentinels", "Separators"]
