"""Static PathName model and friendly encode/decode wrappers.

This module holds the hand-written Pydantic model that enforces the per-sense
field profile, and thin wrappers around the dict-level helpers in
``support``. Absent fields are ``None`` on the model; the sentinel values only
appear through the accessor properties and ``identity``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from handlegraph_metadata.exceptions import InvalidMetadataError
from handlegraph_metadata.grammar.constants import (
    INT64_MAX,
    NO_END_POSITION,
    NO_HAPLOTYPE,
    NO_LOCUS_NAME,
    NO_PHASE_BLOCK,
    NO_SAMPLE_NAME,
    NO_SUBRANGE,
    RESERVED_CHARACTERS,
    SENSE_PROFILES,
)
from handlegraph_metadata.grammar.spec import FIELDS
from handlegraph_metadata.grammar.support import (
    coerce_enum,
    compose_path_name as _compose_from_parts,
    is_component,
    parse_path_name as _parse_to_dict,
)
from handlegraph_metadata.grammar.types import Sense


class Subrange(NamedTuple):
    """0-based half-open bounds of a stored path; ``end`` may be unknown."""

    start: int
    end: int | None = None


class PathIdentity(NamedTuple):
    """The six metadata fields in their sentinel form."""

    sense: Sense
    sample_name: str
    locus_name: str
    haplotype: int
    phase_block: int
    subrange: tuple[int, int]


class PathName(BaseModel):
    """Structured representation of a path name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sense: Sense
    sample: str | None = None
    locus: str | None = None
    haplotype: int | None = None
    phase_block: int | None = None
    subrange: Subrange | None = None

    @field_validator("sense", mode="before")
    @classmethod
    def _coerce_sense(cls, value: Any) -> Any:
        if isinstance(value, str):
            return coerce_enum(Sense, value)
        return value

    @field_validator("sample", "locus", mode="before")
    @classmethod
    def _normalize_text(cls, value: Any, info: ValidationInfo) -> Any:
        absent = NO_SAMPLE_NAME if info.field_name == "sample" else NO_LOCUS_NAME
        return None if value == absent else value

    @field_validator("sample", "locus")
    @classmethod
    def _validate_component(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is not None and not is_component(value):
            raise InvalidMetadataError(
                [
                    f"{info.field_name} must not contain any of "
                    f"{list(RESERVED_CHARACTERS)}"
                ]
            )
        return value

    @field_validator("haplotype", "phase_block", mode="before")
    @classmethod
    def _normalize_number(cls, value: Any, info: ValidationInfo) -> Any:
        absent = NO_HAPLOTYPE if info.field_name == "haplotype" else NO_PHASE_BLOCK
        return None if value == absent else value

    @field_validator("haplotype", "phase_block")
    @classmethod
    def _validate_number(cls, value: int | None, info: ValidationInfo) -> int | None:
        if value is not None and not 0 <= value <= INT64_MAX:
            raise InvalidMetadataError(
                [f"{info.field_name} must be a non-negative 64-bit integer"]
            )
        return value

    @field_validator("subrange", mode="before")
    @classmethod
    def _normalize_subrange(cls, value: Any) -> Any:
        if value is None or isinstance(value, Subrange):
            return value
        try:
            start, end = value
        except (TypeError, ValueError):
            # Leave it for the field type check to report.
            return value
        if start == NO_SUBRANGE[0]:
            if end not in (None, NO_END_POSITION):
                raise InvalidMetadataError(["subrange end given without a start"])
            return None
        return Subrange(start, None if end == NO_END_POSITION else end)

    @field_validator("subrange")
    @classmethod
    def _validate_subrange(cls, value: Subrange | None) -> Subrange | None:
        if value is None:
            return value
        if not 0 <= value.start <= INT64_MAX:
            raise InvalidMetadataError(
                ["subrange start must be a non-negative 64-bit integer"]
            )
        if value.end is not None and not 0 <= value.end <= INT64_MAX:
            raise InvalidMetadataError(
                ["subrange end must be a non-negative 64-bit integer"]
            )
        return value

    @model_validator(mode="after")
    def _check_sense_profile(self) -> PathName:
        profile = SENSE_PROFILES[self.sense]
        required, forbidden = profile.required(), profile.forbidden()
        violations: list[str] = []
        for field in FIELDS:
            present = getattr(self, field) is not None
            if field in required and not present:
                violations.append(f"{field} is required for {self.sense} paths")
            elif field in forbidden and present:
                violations.append(f"{field} is forbidden for {self.sense} paths")
        if violations:
            raise InvalidMetadataError(violations)
        return self

    # Sentinel-valued accessors -------------------------------------------
    @property
    def sample_name(self) -> str:
        return NO_SAMPLE_NAME if self.sample is None else self.sample

    @property
    def locus_name(self) -> str:
        return NO_LOCUS_NAME if self.locus is None else self.locus

    @property
    def haplotype_number(self) -> int:
        return NO_HAPLOTYPE if self.haplotype is None else self.haplotype

    @property
    def phase_block_number(self) -> int:
        return NO_PHASE_BLOCK if self.phase_block is None else self.phase_block

    @property
    def subrange_bounds(self) -> tuple[int, int]:
        if self.subrange is None:
            return NO_SUBRANGE
        end = NO_END_POSITION if self.subrange.end is None else self.subrange.end
        return (self.subrange.start, end)

    @property
    def identity(self) -> PathIdentity:
        return PathIdentity(
            self.sense,
            self.sample_name,
            self.locus_name,
            self.haplotype_number,
            self.phase_block_number,
            self.subrange_bounds,
        )

    def compose(self) -> str:
        return compose_path_name(self)

    def model_dump_compact(self) -> dict[str, Any]:
        return {key: value for key, value in self.model_dump().items() if value is not None}


def _validate(parts: Mapping[str, Any]) -> PathName:
    try:
        return PathName.model_validate(parts)
    except ValidationError as error:
        violations: list[str] = []
        for detail in error.errors():
            cause = (detail.get("ctx") or {}).get("error")
            if isinstance(cause, InvalidMetadataError):
                violations.extend(cause.violations)
            else:
                location = ".".join(str(part) for part in detail["loc"])
                violations.append(f"{location}: {detail['msg']}" if location else detail["msg"])
        raise InvalidMetadataError(violations) from error


def compose_path_name(parts: Mapping[str, Any] | PathName) -> str:
    """Validate ``parts`` and render the canonical path name.

    Raises InvalidMetadataError, before producing any output, when the fields
    do not fit the profile of their sense.
    """
    if isinstance(parts, PathName):
        # Decoded names skip validation, so check them again here.
        parts = parts.model_dump()
    model = _validate(parts)
    return _compose_from_parts(model.model_dump_compact())


def parse_path_name(name: str) -> PathName:
    """Parse a path name. Never raises; see ``support.parse_path_name``."""
    values = _parse_to_dict(name)
    if "subrange" in values:
        values["subrange"] = Subrange(*values["subrange"])
    return PathName.model_construct(**values)


def encode_path_name(
    sense: Sense | str,
    sample: str | None = NO_SAMPLE_NAME,
    locus: str | None = NO_LOCUS_NAME,
    haplotype: int | None = NO_HAPLOTYPE,
    phase_block: int | None = NO_PHASE_BLOCK,
    subrange: tuple[int, int | None] | None = NO_SUBRANGE,
) -> str:
    """Compose a path name from its six metadata fields.

    Absent fields may be given as their sentinel values or as None.
    """
    return compose_path_name(
        {
            "sense": sense,
            "sample": sample,
            "locus": locus,
            "haplotype": haplotype,
            "phase_block": phase_block,
            "subrange": subrange,
        }
    )


def decode_path_name(name: str) -> PathIdentity:
    """Decode a path name into its six metadata fields in sentinel form."""
    return parse_path_name(name).identity


__all__ = [
    "PathIdentity",
    "PathName",
    "Subrange",
    "compose_path_name",
    "decode_path_name",
    "encode_path_name",
    "parse_path_name",
]
