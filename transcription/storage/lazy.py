"""RNA storage that defers transcription until the value is read."""

from __future__ import annotations

from typing import Iterator

from transcription.algorithms.transcriber import transcribe
from transcription.algorithms.validation import check_nucleotides
from transcription.types.parameters import Alphabet, Origin, StorageKind
from transcription.types.sequence import Dna, Rna, register_storage


@register_storage(StorageKind.LAZY)
class LazyRna(Rna):
    """RNA that keeps a reference to its source text and stores nothing else.

    A value built from DNA keeps the DNA text and transcribes it one nucleotide
    at a time on every read; it is never materialized. The source was validated
    on construction against the alphabet matching ``origin`` and is not
    re-checked when read. Instances are immutable.
    """

    def __init__(self, source: str, origin: Origin = Origin.GIVEN_AS_RNA) -> None:
        origin = Origin(origin)
        if origin is Origin.DERIVED_FROM_DNA:
            check_nucleotides(source, Alphabet.DNA)
        else:
            check_nucleotides(source, Alphabet.RNA)
        self._source = source
        self._origin = origin

    @classmethod
    def _from_validated(cls, source: str, origin: Origin) -> "LazyRna":
        rna = cls.__new__(cls)
        rna._source = source
        rna._origin = origin
        return rna

    @classmethod
    def from_text(cls, nucleotides: str) -> "LazyRna":
        return cls(nucleotides)

    @classmethod
    def from_dna(cls, dna: Dna) -> "LazyRna":
        return cls._from_validated(dna.nucleotides, Origin.DERIVED_FROM_DNA)

    @property
    def origin(self) -> Origin:
        return self._origin

    def __iter__(self) -> Iterator[str]:
        if self._origin is Origin.DERIVED_FROM_DNA:
            return transcribe(self._source)
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def copy(self) -> "LazyRna":
        # Nothing mutable to share
        return self


__all__ = ["LazyRna"]
