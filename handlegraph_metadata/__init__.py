import importlib.metadata

from handlegraph_metadata.exceptions import InvalidMetadataError
from handlegraph_metadata.grammar import (
    NO_END_POSITION,
    NO_HAPLOTYPE,
    NO_LOCUS_NAME,
    NO_PHASE_BLOCK,
    NO_SAMPLE_NAME,
    NO_SUBRANGE,
    PathIdentity,
    PathName,
    Sense,
    Subrange,
    decode_path_name,
    encode_path_name,
)
from handlegraph_metadata.path_metadata import (
    create_path,
    for_each_path_matching,
    for_each_path_of_sense,
    for_each_step_of_sense,
    get_haplotype,
    get_locus_name,
    get_path_metadata,
    get_phase_block,
    get_sample_name,
    get_sense,
    get_subrange,
)

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests without an install) has no distribution metadata;
# fall back to a neutral "0.0.0" placeholder.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("handlegraph-metadata")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

__all__ = [
    "InvalidMetadataError",
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
    "__version__",
    "create_path",
    "decode_path_name",
    "encode_path_name",
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
