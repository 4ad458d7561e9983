"""Unit tests for conversion to and from scikit-bio sequences."""

import pytest
from skbio import DNA, RNA

from transcription import (
    Dna,
    FixedRna,
    InvalidNucleotideError,
    OwnedRna,
    Rna,
    StorageBuffer,
)
from transcription.utils.interop import (
    dna_from_skbio,
    dna_to_skbio,
    rna_from_skbio,
    rna_to_skbio,
)


def test_dna_from_skbio():
    """Test that a scikit-bio DNA record becomes a validated Dna."""
    assert dna_from_skbio(DNA("GCTA")) == Dna("GCTA")


def test_degenerate_and_gap_characters_are_rejected():
    """Test that characters scikit-bio allows but DNA does not are reported."""
    with pytest.raises(InvalidNucleotideError) as excinfo:
        dna_from_skbio(DNA("ACGN"))
    assert excinfo.value.index == 3

    with pytest.raises(InvalidNucleotideError) as excinfo:
        dna_from_skbio(DNA("AC-G"))
    assert excinfo.value.index == 2


def test_rna_from_skbio_selects_storage():
    """Test that scikit-bio RNA can be loaded into any backend."""
    assert isinstance(rna_from_skbio(RNA("CGAU")), OwnedRna)

    fixed = rna_from_skbio(RNA("CGAU"), capacity=8)
    assert isinstance(fixed, FixedRna)
    assert fixed == Rna.new("CGAU")

    with rna_from_skbio(RNA("CGAU"), buffer=StorageBuffer.allocate(4)) as borrowed:
        assert borrowed == fixed


def test_to_skbio():
    """Test that our values convert to scikit-bio records with metadata."""
    record = dna_to_skbio(Dna("GCTA"), metadata={"id": "seq1"})
    assert str(record) == "GCTA"
    assert record.metadata["id"] == "seq1"

    rna = rna_to_skbio(Dna("GCTA").into_rna())
    assert rna == RNA("CGAU")


def test_transcription_agrees_with_skbio():
    """Test that our transcription matches scikit-bio's on the template strand."""
    dna = DNA("ACGTGGTCTTAA")
    ours = Dna(str(dna)).into_rna()
    # scikit-bio transcribes the coding strand, so complement first
    assert str(ours) == str(dna.complement().transcribe())
