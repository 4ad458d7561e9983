"""Unit tests for the Dna and Rna sequence entities."""

from __future__ import annotations

import pytest

from transcription import (
    BorrowedRna,
    Dna,
    FixedRna,
    InvalidNucleotideError,
    LazyRna,
    OwnedRna,
    Rna,
    StorageBuffer,
    StorageConfig,
    StorageKind,
    set_active_config,
)
from transcription.types.sequence import storage_backend


def test_valid_dna_input():
    """Test that DNA made of A, C, G, T is accepted."""
    dna = Dna("GCTA")
    assert str(dna) == "GCTA"
    assert len(dna) == 4
    assert list(dna) == ["G", "C", "T", "A"]


def test_valid_rna_input():
    """Test that RNA made of A, C, G, U is accepted."""
    rna = Rna.new("CGAU")
    assert str(rna) == "CGAU"


@pytest.mark.parametrize(
    "nucleotides, index",
    [("X", 0), ("U", 0), ("ACGTUXXCTTAA", 4)],
)
def test_invalid_dna_input(nucleotides, index):
    """Test that invalid DNA reports the index of the first invalid character."""
    with pytest.raises(InvalidNucleotideError) as excinfo:
        Dna(nucleotides)
    assert excinfo.value.index == index


@pytest.mark.parametrize(
    "nucleotides, index",
    [("X", 0), ("T", 0), ("ACGUTTXCUUAA", 4)],
)
def test_invalid_rna_input(nucleotides, index):
    """Test that invalid RNA reports the index of the first invalid character."""
    with pytest.raises(InvalidNucleotideError) as excinfo:
        Rna.new(nucleotides)
    assert excinfo.value.index == index


def test_dna_rejects_non_string_input():
    """Test that Dna only wraps str."""
    with pytest.raises(TypeError):
        Dna(b"GCTA")


def test_acid_equals_acid():
    """Test value equality of both sequence roles."""
    assert Dna("CGA") == Dna("CGA")
    assert Dna("CGA") != Dna("AGC")
    assert Rna.new("CGA") == Rna.new("CGA")
    assert Rna.new("CGA") != Rna.new("AGC")


def test_dna_is_hashable_and_renders_like_rna():
    """Test that Dna hashes by value and renders as Dna("...")."""
    assert hash(Dna("GCTA")) == hash(Dna("GCTA"))
    assert len({Dna("GCTA"), Dna("GCTA"), Dna("A")}) == 2
    assert repr(Dna("GCTA")) == 'Dna("GCTA")'


def test_dna_is_immutable():
    """Test that the validated text of a Dna cannot be replaced."""
    dna = Dna("GCTA")
    with pytest.raises(AttributeError):
        dna.nucleotides = "XXXX"


def test_rna_is_unhashable():
    """Test that no Rna backend can be hashed."""
    with pytest.raises(TypeError):
        hash(Rna.new("CGAU"))
    with pytest.raises(TypeError):
        hash(Dna("GCTA").into_rna())


def test_rna_is_not_equal_to_plain_text():
    """Test that Rna compares only with other Rna values."""
    assert Rna.new("CGAU") != "CGAU"
    assert Dna("GCTA") != Dna("GCTA").into_rna()


def test_rna_base_class_is_abstract():
    """Test that Rna itself has no storage and cannot be instantiated."""
    with pytest.raises(TypeError):
        Rna()  # pylint: disable=abstract-class-instantiated


@pytest.mark.parametrize(
    "kind, backend",
    [
        (StorageKind.OWNED, OwnedRna),
        (StorageKind.FIXED, FixedRna),
        (StorageKind.BORROWED, BorrowedRna),
        (StorageKind.LAZY, LazyRna),
        ("lazy", LazyRna),
    ],
)
def test_storage_backend_registry(kind, backend):
    """Test that every storage kind resolves to its backend class."""
    assert storage_backend(kind) is backend
    assert backend.kind is StorageKind(kind)


def test_default_storage_selection():
    """Test the default backends: owned for given RNA, lazy for transcription."""
    assert isinstance(Rna.new("CGAU"), OwnedRna)
    assert isinstance(Dna("GCTA").into_rna(), LazyRna)


def test_storage_selection_is_inferred_from_options():
    """Test that a capacity selects fixed storage and a buffer borrowed storage."""
    fixed = Dna("GCTA").into_rna(capacity=4)
    assert isinstance(fixed, FixedRna)
    assert fixed.capacity == 4

    borrowed = Dna("GCTA").into_rna(buffer=StorageBuffer.allocate(4))
    assert isinstance(borrowed, BorrowedRna)
    borrowed.release()


def test_explicit_storage_selection_by_name():
    """Test that storage can be chosen by its string name."""
    assert isinstance(Rna.new("CGAU", "lazy"), LazyRna)
    assert isinstance(Dna("GCTA").into_rna("owned"), OwnedRna)
    assert Rna.new("CGAU", "fixed").capacity == 12


@pytest.mark.parametrize(
    "storage, options",
    [
        ("lazy", {"capacity": 4}),
        ("owned", {"buffer": StorageBuffer.allocate(4)}),
        ("fixed", {"buffer": StorageBuffer.allocate(4)}),
        ("borrowed", {}),
    ],
)
def test_mismatched_storage_options_are_rejected(storage, options):
    """Test that options are only accepted by the backend they apply to."""
    with pytest.raises(TypeError):
        Dna("GCTA").into_rna(storage, **options)


def test_unknown_storage_kind_is_rejected():
    """Test that an unknown storage name raises ValueError."""
    with pytest.raises(ValueError):
        Rna.new("CGAU", "heap")


def test_per_call_config_overrides_defaults():
    """Test that a config passed to a call replaces the active one for that call."""
    config = StorageConfig(rna_storage="lazy", transcription_storage="fixed", fixed_capacity=4)

    assert isinstance(Rna.new("CGAU", config=config), LazyRna)
    rna = Dna("GCTA").into_rna(config=config)
    assert isinstance(rna, FixedRna)
    assert rna.capacity == 4


def test_active_config_changes_defaults():
    """Test that the process-wide config drives storage selection."""
    set_active_config(StorageConfig(transcription_storage="owned"))
    assert isinstance(Dna("GCTA").into_rna(), OwnedRna)


def test_set_active_config_rejects_other_types():
    """Test that only a StorageConfig can become the active config."""
    with pytest.raises(TypeError):
        set_active_config({"rna_storage": "lazy"})


def test_to_owned_copies_any_backend():
    """Test that to_owned produces an equal OwnedRna."""
    lazy = Dna("GCTA").into_rna()
    owned = lazy.to_owned()
    assert isinstance(owned, OwnedRna)
    assert owned == lazy


def test_dna_new_matches_constructor():
    """Test that Dna.new validates exactly like Dna(...)."""
    assert Dna.new("GCTA") == Dna("GCTA")
    assert Dna.new("GCTA").into_rna() == Rna.new("CGAU")
    with pytest.raises(InvalidNucleotideError) as excinfo:
        Dna.new("ACGTUXXCTTAA")
    assert excinfo.value.index == 4
