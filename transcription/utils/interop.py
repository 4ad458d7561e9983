"""Functions for converting between scikit-bio sequences and our sequence types."""

from typing import Any, Dict, Optional

from skbio import DNA, RNA

from transcription.types import Dna, Rna, StorageConfig
from transcription.types.sequence import StorageSelector


def _nucleotides(record: Any) -> str:
    return b"".join(record.values).decode()


def dna_from_skbio(record: DNA) -> Dna:
    """Convert a scikit-bio DNA record to a Dna.

    Degenerate and gap characters are not part of the DNA alphabet and raise
    InvalidNucleotideError.
    """
    return Dna(_nucleotides(record))


def rna_from_skbio(
    record: RNA,
    storage: StorageSelector = None,
    *,
    capacity: Optional[int] = None,
    buffer: Any = None,
    config: Optional[StorageConfig] = None,
) -> Rna:
    """Convert a scikit-bio RNA record to an Rna held by the selected backend."""
    return Rna.new(
        _nucleotides(record),
        storage,
        capacity=capacity,
        buffer=buffer,
        config=config,
    )


def dna_to_skbio(dna: Dna, metadata: Optional[Dict[str, Any]] = None) -> DNA:
    """Convert a Dna to a scikit-bio DNA record."""
    return DNA(str(dna), metadata=metadata)


def rna_to_skbio(rna: Rna, metadata: Optional[Dict[str, Any]] = None) -> RNA:
    """Convert any Rna backend to a scikit-bio RNA record."""
    return RNA(str(rna), metadata=metadata)


__all__ = ["dna_from_skbio", "rna_from_skbio", "dna_to_skbio", "rna_to_skbio"]
