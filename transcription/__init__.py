"""Nucleotide sequence validation and DNA to RNA transcription."""

from .types import (
    Alphabet,
    BufferBorrowError,
    CapacityExceededError,
    Dna,
    InvalidNucleotideError,
    Origin,
    OverflowPolicy,
    Rna,
    SequenceError,
    StorageConfig,
    StorageKind,
    active_config,
    set_active_config,
)
from .storage import BorrowedRna, FixedRna, LazyRna, OwnedRna, StorageBuffer


__all__ = [
    "Alphabet",
    "BufferBorrowError",
    "CapacityExceededError",
    "Dna",
    "InvalidNucleotideError",
    "Origin",
    "OverflowPolicy",
    "Rna",
    "SequenceError",
    "StorageConfig",
    "StorageKind",
    "active_config",
    "set_active_config",
    "BorrowedRna",
    "FixedRna",
    "LazyRna",
    "OwnedRna",
    "StorageBuffer",
]
