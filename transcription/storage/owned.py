"""Owned, growable RNA storage."""

from __future__ import annotations

import logging
from typing import Iterator

from transcription.algorithms.transcriber import transcribe_text
from transcription.algorithms.validation import check_rna
from transcription.constants import NUCLEOTIDE_ENCODING
from transcription.types.parameters import StorageKind
from transcription.types.sequence import Dna, Rna, register_storage

logger = logging.getLogger(__name__)


@register_storage(StorageKind.OWNED)
class OwnedRna(Rna):
    """RNA held in a buffer it owns, sized exactly to its length.

    The buffer grows and shrinks with the value, so there is never unused
    capacity to leak.
    """

    def __init__(self, nucleotides: str) -> None:
        check_rna(nucleotides)
        self._data = bytearray(nucleotides.encode(NUCLEOTIDE_ENCODING))

    @classmethod
    def _from_validated(cls, nucleotides: str) -> "OwnedRna":
        rna = cls.__new__(cls)
        rna._data = bytearray(nucleotides.encode(NUCLEOTIDE_ENCODING))
        return rna

    @classmethod
    def from_text(cls, nucleotides: str) -> "OwnedRna":
        return cls(nucleotides)

    @classmethod
    def from_dna(cls, dna: Dna) -> "OwnedRna":
        rna = cls._from_validated(transcribe_text(dna.nucleotides))
        logger.debug("Transcribed %d nucleotides into owned storage", len(rna))
        return rna

    def __iter__(self) -> Iterator[str]:
        return iter(self._data.decode(NUCLEOTIDE_ENCODING))

    def __len__(self) -> int:
        return len(self._data)

    def copy(self) -> "OwnedRna":
        return self._from_validated(str(self))

    def assign(self, nucleotides: str) -> None:
        """Replace the value with validated RNA ``nucleotides``."""
        check_rna(nucleotides)
        self._data[:] = nucleotides.encode(NUCLEOTIDE_ENCODING)
        logger.debug("Assigned %d nucleotides to owned storage", len(self._data))

    def extend(self, nucleotides: str) -> None:
        """Append validated RNA ``nucleotides``.

        On an InvalidNucleotideError the index refers to ``nucleotides``, not
        to the combined sequence, and nothing is appended.
        """
        check_rna(nucleotides)
        self._data.extend(nucleotides.encode(NUCLEOTIDE_ENCODING))


__all__ = ["OwnedRna"]
