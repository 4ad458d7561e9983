"""Fixed-capacity RNA storage backed by an inline numpy array."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

import numpy as np

from transcription.algorithms.transcriber import transcribe
from transcription.algorithms.validation import check_rna
from transcription.constants import NUCLEOTIDE_ENCODING, WIPE_BYTE
from transcription.storage.bounds import bounded_length, resolve_policy
from transcription.types.errors import CapacityExceededError
from transcription.types.parameters import OverflowPolicy, StorageKind, active_config
from transcription.types.sequence import Dna, Rna, register_storage

logger = logging.getLogger(__name__)


@register_storage(StorageKind.FIXED)
class FixedRna(Rna):
    """RNA held in a byte array of fixed capacity.

    Only the prefix ``[0, len)`` is live. Everything observable (iteration,
    equality, formatting, copying) reads that prefix only, and every shrinking
    write zeroes the slots it vacates, so earlier nucleotides never survive in
    the unused capacity.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = active_config().fixed_capacity
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._data = np.zeros(capacity, dtype=np.uint8)
        self._length = 0

    @classmethod
    def from_text(
        cls,
        nucleotides: str,
        capacity: Optional[int] = None,
        *,
        policy: Optional[OverflowPolicy] = None,
    ) -> "FixedRna":
        check_rna(nucleotides)
        rna = cls(capacity)
        count = bounded_length(len(nucleotides), rna.capacity, resolve_policy(policy))
        rna._write(nucleotides, count)
        return rna

    @classmethod
    def from_dna(
        cls,
        dna: Dna,
        capacity: Optional[int] = None,
        *,
        policy: Optional[OverflowPolicy] = None,
    ) -> "FixedRna":
        rna = cls(capacity)
        count = bounded_length(len(dna), rna.capacity, resolve_policy(policy))
        rna._write(transcribe(dna), count)
        logger.debug(
            "Transcribed %d nucleotides into fixed storage of capacity %d",
            count,
            rna.capacity,
        )
        return rna

    @property
    def capacity(self) -> int:
        return len(self._data)

    def _write(self, nucleotides: Iterable[str], count: int) -> None:
        """Store the first ``count`` nucleotides, zeroing any slots vacated."""
        codes = np.fromiter(
            (ord(nucleotide) for nucleotide in nucleotides), dtype=np.uint8, count=count
        )
        previous = self._length
        self._data[:count] = codes
        if count < previous:
            self._data[count:previous] = WIPE_BYTE
        self._length = count

    def _live(self) -> str:
        return self._data[: self._length].tobytes().decode(NUCLEOTIDE_ENCODING)

    def __iter__(self) -> Iterator[str]:
        return iter(self._live())

    def __len__(self) -> int:
        return self._length

    def assign(
        self, nucleotides: str, *, policy: Optional[OverflowPolicy] = None
    ) -> None:
        """Replace the value with validated RNA ``nucleotides``.

        On failure the current value is left untouched.
        """
        check_rna(nucleotides)
        count = bounded_length(len(nucleotides), self.capacity, resolve_policy(policy))
        self._write(nucleotides, count)
        logger.debug("Assigned %d nucleotides to fixed storage", count)

    def copy(self, capacity: Optional[int] = None) -> "FixedRna":
        """Copy the live nucleotides into new storage of ``capacity``.

        Defaults to the current capacity. Unused slots of ``self`` are never
        copied.
        """
        rna = FixedRna(self.capacity if capacity is None else capacity)
        if self._length > rna.capacity:
            raise CapacityExceededError(
                accepted=rna.capacity, required=self._length, capacity=rna.capacity
            )
        rna._data[: self._length] = self._data[: self._length]
        rna._length = self._length
        return rna


__all__ = ["FixedRna"]
