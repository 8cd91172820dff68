"""Path-name grammar: parsing, composition and the PathName model."""

from __future__ import annotations

from .constants import (
    NO_END_POSITION,
    NO_HAPLOTYPE,
    NO_LOCUS_NAME,
    NO_PHASE_BLOCK,
    NO_SAMPLE_NAME,
    NO_SUBRANGE,
)
from .model import (
    PathIdentity,
    PathName,
    Subrange,
    compose_path_name,
    decode_path_name,
    encode_path_name,
    parse_path_name,
)
from .support import coerce_enum
from .types import Sense

__all__ = [
    "NO_END_POSITION",
    "NO_HAPLOTYPE",
    "NO_LOCUS_NAME",
    "NO_PHASE_BLOCK",
    "NO_SAMPLE_NAME",
    "NO_SUBRANGE",
    "PathIdentity",
    "PathName",
    "Sense",
    "Subrange",
    "coerce_enum",
    "compose_path_name",
    "decode_path_name",
    "encode_path_name",
    "parse_path_name",
]
