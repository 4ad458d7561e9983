"""DNA to RNA transcription."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator

from transcription.types.parameters import DNA_BASES

TRANSCRIPTION: Dict[str, str] = {"A": "U", "C": "G", "G": "C", "T": "A"}

# Table for str.translate, used when a whole sequence is materialized at once
_TRANSCRIPTION_TABLE = str.maketrans("ACGT", "UGCA")


def dna_to_rna(nucleotide: str) -> str:
    """Transcribe one DNA nucleotide: A->U, C->G, G->C, T->A.

    The input must already be validated DNA; anything else is a caller bug and
    raises ValueError.
    """
    try:
        return TRANSCRIPTION[nucleotide]
    except KeyError:
        raise ValueError(
            f"nucleotide must be one of {DNA_BASES}, got {nucleotide!r}"
        ) from None


def transcribe(nucleotides: Iterable[str]) -> Iterator[str]:
    """Yield the RNA nucleotide for each DNA nucleotide, in order."""
    for nucleotide in nucleotides:
        yield dna_to_rna(nucleotide)


def transcribe_text(dna: str) -> str:
    """Transcribe validated DNA text in one pass."""
    return dna.translate(_TRANSCRIPTION_TABLE)


__all__ = ["TRANSCRIPTION", "dna_to_rna", "transcribe", "transcribe_text"]
