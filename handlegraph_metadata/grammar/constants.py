"""Constants of the path-name mini-format, derived from specification.yml."""

from __future__ import annotations

from handlegraph_metadata.grammar.spec import GrammarSpec, SenseProfile
from handlegraph_metadata.grammar.types import Sense

_SPEC = GrammarSpec.load()

SEPARATOR = _SPEC.separators.component
RANGE_START_SEPARATOR = _SPEC.separators.range_start
RANGE_END_SEPARATOR = _SPEC.separators.range_end
RANGE_TERMINATOR = _SPEC.separators.range_terminator

# Characters that may never appear inside a name component.
RESERVED_CHARACTERS = (SEPARATOR, RANGE_START_SEPARATOR)

NO_SAMPLE_NAME: str = _SPEC.sentinels.no_sample_name
NO_LOCUS_NAME: str = _SPEC.sentinels.no_locus_name
NO_HAPLOTYPE: int = _SPEC.sentinels.no_haplotype
NO_PHASE_BLOCK: int = _SPEC.sentinels.no_phase_block
NO_END_POSITION: int = _SPEC.sentinels.no_end_position
NO_SUBRANGE: tuple[int, int] = (-1, NO_END_POSITION)

# Haplotype, phase block and range values are signed 64-bit integers.
INT64_MAX = 2**63 - 1

SENSE_PROFILES: dict[Sense, SenseProfile] = {
    Sense(identifier): profile for identifier, profile in _SPEC.sense_map.items()
}

__all__ = [
    "INT64_MAX",
    "NO_END_POSITION",
    "NO_HAPLOTYPE",
    "NO_LOCUS_NAME",
    "NO_PHASE_BLOCK",
    "NO_SAMPLE_NAME",
    "NO_SUBRANGE",
    "RANGE_END_SEPARATOR",
    "RANGE_START_SEPARATOR",
    "RANGE_TERMINATOR",
    "RESERVED_CHARACTERS",
    "SENSE_PROFILES",
    "SEPARATOR",
]
