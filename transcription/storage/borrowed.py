"""RNA storage written into a caller-supplied buffer."""

from __future__ import annotations

import logging
import weakref
from itertools import islice
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from transcription.algorithms.transcriber import transcribe
from transcription.algorithms.validation import check_rna
from transcription.constants import NUCLEOTIDE_ENCODING, WIPE_BYTE
from transcription.storage.bounds import bounded_length, resolve_policy
from transcription.types.errors import BufferBorrowError
from transcription.types.parameters import OverflowPolicy, StorageKind
from transcription.types.sequence import Dna, Rna, register_storage

logger = logging.getLogger(__name__)

# Every StorageBuffer currently lent, whichever wrapper reached the memory
_LENT_BUFFERS: "weakref.WeakSet[StorageBuffer]" = weakref.WeakSet()


class StorageBuffer:
    """Caller-owned byte storage that is lent to one BorrowedRna at a time.

    Wraps any writable, byte-addressable buffer (``bytearray``, a writable
    ``memoryview``, a contiguous ``numpy.uint8`` array). While lent, the
    buffer's contents can only be reached through its borrower; the raw object
    passed in must not be written to directly in the meantime. Exclusivity
    follows the memory, not the wrapper: a buffer overlapping the memory of a
    lent buffer cannot be lent or read either.
    """

    def __init__(self, raw: Any) -> None:
        view = memoryview(raw)
        if view.readonly:
            raise TypeError("storage buffer must be writable")
        if not view.contiguous:
            raise TypeError("storage buffer must be contiguous")
        self._view = view.cast("B")
        self._array = np.frombuffer(self._view, dtype=np.uint8)
        self._borrower: Optional["weakref.ReferenceType[BorrowedRna]"] = None

    @classmethod
    def allocate(cls, capacity: int) -> "StorageBuffer":
        """Create a zeroed buffer of ``capacity`` bytes."""
        return cls(bytearray(capacity))

    def __len__(self) -> int:
        return len(self._view)

    @property
    def borrowed(self) -> bool:
        # A borrower that was garbage collected no longer holds the buffer
        return self._borrower is not None and self._borrower() is not None

    def tobytes(self) -> bytes:
        """Return the whole buffer, including bytes past any written length."""
        self._ensure_available()
        return self._view.tobytes()

    def _overlaps(self, other: "StorageBuffer") -> bool:
        return np.shares_memory(self._array, other._array)

    def _ensure_available(self) -> None:
        if self.borrowed:
            raise BufferBorrowError("storage buffer is lent to a BorrowedRna")
        for lent in list(_LENT_BUFFERS):
            if lent is not self and lent.borrowed and self._overlaps(lent):
                raise BufferBorrowError(
                    "storage buffer overlaps memory lent to another BorrowedRna"
                )

    def _lend(self, borrower: "BorrowedRna") -> memoryview:
        self._ensure_available()
        self._borrower = weakref.ref(borrower)
        _LENT_BUFFERS.add(self)
        return self._view

    def _reclaim(self, borrower: "BorrowedRna") -> None:
        if self._borrower is None or self._borrower() is not borrower:
            raise BufferBorrowError("storage buffer is not lent to this BorrowedRna")
        self._borrower = None
        _LENT_BUFFERS.discard(self)

    def __repr__(self) -> str:
        state = "borrowed" if self.borrowed else "available"
        return f"StorageBuffer(capacity={len(self)}, {state})"


def _as_storage_buffer(buffer: Any) -> StorageBuffer:
    if not isinstance(buffer, StorageBuffer):
        raise TypeError(
            f"borrowed storage requires a StorageBuffer, not {type(buffer).__name__}"
        )
    return buffer


@register_storage(StorageKind.BORROWED)
class BorrowedRna(Rna):
    """RNA written into ``[0, len)`` of a StorageBuffer the caller owns.

    Lending zeroes the whole buffer. The buffer stays lent until
    ``release()`` (or the end of a ``with`` block). Reads of a released instance raise BufferBorrowError.
    """

    def __init__(self, buffer: StorageBuffer) -> None:
        self._buffer = _as_storage_buffer(buffer)
        self._view: Optional[memoryview] = self._buffer._lend(self)
        # Bytes left by an earlier borrower are never part of this value
        self._view[:] = bytes([WIPE_BYTE]) * len(self._view)
        self._length = 0

    @classmethod
    def from_text(
        cls,
        nucleotides: str,
        buffer: StorageBuffer,
        *,
        policy: Optional[OverflowPolicy] = None,
    ) -> "BorrowedRna":
        check_rna(nucleotides)
        buffer = _as_storage_buffer(buffer)
        count = bounded_length(len(nucleotides), len(buffer), resolve_policy(policy))
        rna = cls(buffer)
        rna._write(nucleotides, count)
        return rna

    @classmethod
    def from_dna(
        cls,
        dna: Dna,
        buffer: StorageBuffer,
        *,
        policy: Optional[OverflowPolicy] = None,
    ) -> "BorrowedRna":
        buffer = _as_storage_buffer(buffer)
        count = bounded_length(len(dna), len(buffer), resolve_policy(policy))
        rna = cls(buffer)
        rna._write(transcribe(dna), count)
        logger.debug(
            "Transcribed %d nucleotides into a borrowed buffer of capacity %d",
            count,
            len(buffer),
        )
        return rna

    def _storage(self) -> memoryview:
        if self._view is None:
            raise BufferBorrowError("BorrowedRna has released its storage buffer")
        return self._view

    def _write(self, nucleotides: Iterable[str], count: int) -> None:
        """Store the first ``count`` nucleotides, zeroing any slots vacated."""
        storage = self._storage()
        encoded = bytes(ord(nucleotide) for nucleotide in islice(nucleotides, count))
        previous = self._length
        storage[:count] = encoded
        if count < previous:
            storage[count:previous] = bytes([WIPE_BYTE]) * (previous - count)
        self._length = count

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def released(self) -> bool:
        return self._view is None

    def __iter__(self) -> Iterator[str]:
        live = self._storage()[: self._length].tobytes()
        return iter(live.decode(NUCLEOTIDE_ENCODING))

    def __len__(self) -> int:
        self._storage()
        return self._length

    def __repr__(self) -> str:
        if self.released:
            return "<BorrowedRna released>"
        return super().__repr__()

    def assign(
        self, nucleotides: str, *, policy: Optional[OverflowPolicy] = None
    ) -> None:
        """Replace the value with validated RNA ``nucleotides``.

        On failure the current value is left untouched.
        """
        check_rna(nucleotides)
        self._storage()
        count = bounded_length(len(nucleotides), self.capacity, resolve_policy(policy))
        self._write(nucleotides, count)
        logger.debug("Assigned %d nucleotides to a borrowed buffer", count)

    def copy(self) -> "Rna":
        raise TypeError(
            "BorrowedRna cannot be copied because it does not own its storage; "
            "use to_owned()"
        )

    def release(self) -> StorageBuffer:
        """Give the storage buffer back to the caller. Idempotent."""
        if self._view is not None:
            self._view = None
            self._buffer._reclaim(self)
        return self._buffer

    def __enter__(self) -> "BorrowedRna":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


__all__ = ["StorageBuffer", "BorrowedRna"]
