"""Path metadata accessors and filtered iteration over a handle graph.

Every accessor asks the graph for the path's stored name and decodes it with
the path-name grammar, so any graph that implements ``get_path_name`` gets
metadata support for free. Nothing is cached between calls.

Paths come in three senses:

- ``Sense.GENERIC``: a generic named path with only a locus name. Names that
  do not follow the structured format read back as generic.
- ``Sense.REFERENCE``: part of a reference assembly, with a sample name, a
  locus name and possibly a haplotype number. A structured name without a
  phase block reads back as a reference, even with no sample.
- ``Sense.HAPLOTYPE``: a haplotype of a particular individual, with a sample
  name, a locus name, a haplotype number and a phase block.

Paths of any sense may store only a subrange of a longer conceptual path.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from handlegraph_metadata.grammar import (
    NO_SUBRANGE,
    PathName,
    Sense,
    coerce_enum,
    encode_path_name,
    parse_path_name,
)
from handlegraph_metadata.handlegraph import (
    MutablePathHandleGraph,
    NodeHandle,
    PathHandle,
    PathHandleGraph,
    PathNameProvider,
    StepHandle,
    Visitor,
    keep_going,
)

logger = logging.getLogger(__name__)


def get_path_metadata(graph: PathNameProvider, path_handle: PathHandle) -> PathName:
    """Decode every metadata field of a path at once."""
    return parse_path_name(graph.get_path_name(path_handle))


def get_sense(graph: PathNameProvider, path_handle: PathHandle) -> Sense:
    """What the path is meant to be representing."""
    return get_path_metadata(graph, path_handle).sense


def get_sample_name(graph: PathNameProvider, path_handle: PathHandle) -> str:
    """Sample or assembly name of the path, or NO_SAMPLE_NAME."""
    return get_path_metadata(graph, path_handle).sample_name


def get_locus_name(graph: PathNameProvider, path_handle: PathHandle) -> str:
    """Contig, scaffold or gene name of the path, or NO_LOCUS_NAME."""
    return get_path_metadata(graph, path_handle).locus_name


def get_haplotype(graph: PathNameProvider, path_handle: PathHandle) -> int:
    """Haplotype number of the path, or NO_HAPLOTYPE.

    A haplotype of 0 means only one haplotype is present.
    """
    return get_path_metadata(graph, path_handle).haplotype_number


def get_phase_block(graph: PathNameProvider, path_handle: PathHandle) -> int:
    """Phase block of the path, or NO_PHASE_BLOCK."""
    return get_path_metadata(graph, path_handle).phase_block_number


def get_subrange(graph: PathNameProvider, path_handle: PathHandle) -> tuple[int, int]:
    """0-based ``(start, end)`` of the stored region, or NO_SUBRANGE.

    The end is NO_END_POSITION when only a start is stored.
    """
    return get_path_metadata(graph, path_handle).subrange_bounds


def _constraint(values: Iterable | None) -> frozenset | None:
    if values is None:
        return None
    if isinstance(values, str):
        values = (values,)
    return frozenset(values)


def for_each_path_matching(
    graph: PathHandleGraph,
    visitor: Visitor,
    senses: Iterable[Sense | str] | None = None,
    samples: Iterable[str] | None = None,
    loci: Iterable[str] | None = None,
) -> bool:
    """Visit paths whose sense, sample and locus are each in the given sets.

    A constraint of None leaves that field unrestricted. Paths are visited in
    the graph's enumeration order. Returns False if the visitor returned False
    and stopped the iteration, True otherwise.
    """
    if senses is not None:
        if isinstance(senses, str):
            senses = (senses,)
        senses = frozenset(coerce_enum(Sense, sense) for sense in senses)
    sample_set = _constraint(samples)
    locus_set = _constraint(loci)
    iteratee = keep_going(visitor)

    def visit(path_handle: PathHandle) -> bool:
        metadata = get_path_metadata(graph, path_handle)
        if senses is not None and metadata.sense not in senses:
            return True
        if sample_set is not None and metadata.sample_name not in sample_set:
            return True
        if locus_set is not None and metadata.locus_name not in locus_set:
            return True
        if not iteratee(path_handle):
            logger.debug("Path iteration stopped by visitor at %r", path_handle)
            return False
        return True

    return graph.for_each_path_handle(visit)


def for_each_path_of_sense(
    graph: PathHandleGraph, sense: Sense | str, visitor: Visitor
) -> bool:
    """Visit all paths with the given sense. Returns False if stopped early."""
    return for_each_path_matching(graph, visitor, senses=(sense,))


def for_each_step_of_sense(
    graph: PathHandleGraph, node_handle: NodeHandle, sense: Sense | str, visitor: Visitor
) -> bool:
    """Visit the steps on a node that belong to paths of the given sense.

    Returns False if the visitor stopped the iteration early.
    """
    wanted = coerce_enum(Sense, sense)
    iteratee = keep_going(visitor)

    def visit(step_handle: StepHandle) -> bool:
        path_handle = graph.get_path_handle_of_step(step_handle)
        if get_sense(graph, path_handle) != wanted:
            return True
        if not iteratee(step_handle):
            logger.debug("Step iteration stopped by visitor at %r", step_handle)
            return False
        return True

    return graph.for_each_step_on_handle(node_handle, visit)


def create_path(
    graph: MutablePathHandleGraph,
    sense: Sense | str,
    sample: str | None,
    locus: str | None,
    haplotype: int | None,
    phase_block: int | None,
    subrange: tuple[int, int | None] | None = NO_SUBRANGE,
    is_circular: bool = False,
) -> PathHandle:
    """Create a path whose name carries the given metadata.

    The name is composed first, so invalid metadata raises InvalidMetadataError
    without modifying the graph.
    """
    name = encode_path_name(sense, sample, locus, haplotype, phase_block, subrange)
    logger.debug("Creating %s path %r", sense, name)
    return graph.create_path_handle(name, is_circular)


__all__ = [
    "create_path",
    "for_each_path_matching",
    "for_each_path_of_sense",
    "for_each_step_of_sense",
    "get_haplotype",
    "get_locus_name",
    "get_path_metadata",
    "get_phase_block",
    "get_sample_name",
    "get_sense",
    "get_subrange",
]
