import logging

import pytest

from handlegraph_metadata import (
    NO_SUBRANGE,
    PathIdentity,
    Sense,
    decode_path_name,
)
from handlegraph_metadata.grammar import parse_path_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("GRCh38#chrM", (Sense.REFERENCE, "GRCh38", "chrM", -1, -1, (-1, -1))),
        (
            "CHM13#chr12[300-400]",
            (Sense.REFERENCE, "CHM13", "chr12", -1, -1, (300, 400)),
        ),
        ("NA19239#1#chr1", (Sense.REFERENCE, "NA19239", "chr1", 1, -1, (-1, -1))),
        ("NA29239#1#chr1#0", (Sense.HAPLOTYPE, "NA29239", "chr1", 1, 0, (-1, -1))),
        ("1[100]", (Sense.REFERENCE, "", "1", -1, -1, (100, -1))),
        ("chr1", (Sense.REFERENCE, "", "chr1", -1, -1, (-1, -1))),
        ("HG002#0#chr20#17[10-20]", (Sense.HAPLOTYPE, "HG002", "chr20", 0, 17, (10, 20))),
        ("CHM13#chrX[0]", (Sense.REFERENCE, "CHM13", "chrX", -1, -1, (0, -1))),
        ("CHM13#5", (Sense.REFERENCE, "CHM13", "5", -1, -1, (-1, -1))),
        ("S#1#2", (Sense.REFERENCE, "S", "2", 1, -1, (-1, -1))),
        ("chr1]", (Sense.REFERENCE, "", "chr1]", -1, -1, (-1, -1))),
        ("a-b]c", (Sense.REFERENCE, "", "a-b]c", -1, -1, (-1, -1))),
    ],
)
def test_structured_names(name, expected):
    assert decode_path_name(name) == PathIdentity(*expected)


def test_bare_locus_with_range():
    identity = decode_path_name("1[100]")
    assert identity.sample_name == ""
    assert identity.locus_name == "1"
    assert identity.subrange == (100, -1)
    # Structured, so inferred as a reference even without a sample.
    assert identity.sense == Sense.REFERENCE


def test_diploid_reference_slot_order():
    # The middle component of a three-part name is the haplotype.
    identity = decode_path_name("NA19239#1#chr1")
    assert identity.sample_name == "NA19239"
    assert identity.haplotype == 1
    assert identity.locus_name == "chr1"


@pytest.mark.parametrize(
    "name",
    [
        "",
        "#chr1",
        "sample#",
        "a##b",
        "a#b#c",
        "a#1#b#c",
        "a#1#b#2#c",
        "chr1[abc]",
        "chr1[10-]",
        "chr1[-5]",
        "chr1[",
        "a[b#c",
        "chr1[1][2]",
        "[100]",
        "S#1#L#99999999999999999999",
        "chr1[3-99999999999999999999]",
        "S#+1#L",
        "S#１#L",
    ],
)
def test_unstructured_names_fall_back_to_generic(name):
    identity = decode_path_name(name)
    assert identity == PathIdentity(Sense.GENERIC, "", name, -1, -1, NO_SUBRANGE)


@pytest.mark.parametrize(
    "name, has_phase_block",
    [
        ("GRCh38#chrM", False),
        ("NA19239#1#chr1[5-6]", False),
        ("NA29239#1#chr1#0", True),
        ("NA29239#1#chr1#3[7]", True),
        ("chr1[5]", False),
        ("chr1", False),
    ],
)
def test_sense_inference(name, has_phase_block):
    expected = Sense.HAPLOTYPE if has_phase_block else Sense.REFERENCE
    assert decode_path_name(name).sense == expected


def test_parse_keeps_absent_fields_as_none():
    parsed = parse_path_name("CHM13#chr12[300]")
    assert parsed.sample == "CHM13"
    assert parsed.haplotype is None
    assert parsed.phase_block is None
    assert parsed.subrange.start == 300
    assert parsed.subrange.end is None
    assert parsed.subrange_bounds == (300, -1)
    assert parsed.model_dump_compact() == {
        "sense": Sense.REFERENCE,
        "sample": "CHM13",
        "locus": "chr12",
        "subrange": (300, None),
    }


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="handlegraph_metadata"):
        decode_path_name("a#b#c")
    assert "not structured" in caplog.text
    assert "'a#b#c'" in caplog.text
