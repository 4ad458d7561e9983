"""Error types raised by sequence construction and storage."""

from __future__ import annotations

from transcription.types.parameters import Alphabet


class SequenceError(ValueError):
    """Base class for invalid nucleotide sequence input."""


class InvalidNucleotideError(SequenceError):
    """A character outside the requested alphabet.

    Raised the same way for characters that are not nucleotides at all and for
    nucleotides of the other alphabet (``U`` in DNA, ``T`` in RNA).

    Attributes:
        index: 0-based position of the first invalid character.
        nucleotide: The offending character.
        alphabet: The alphabet the input was checked against.
    """

    def __init__(self, index: int, nucleotide: str, alphabet: Alphabet) -> None:
        self.index = index
        self.nucleotide = nucleotide
        self.alphabet = alphabet
        super().__init__(
            f"Invalid {alphabet.name} nucleotide {nucleotide!r} at index {index}; "
            f"allowed: {list(alphabet.bases)}"
        )


class CapacityExceededError(SequenceError):
    """Input longer than the capacity of bounded storage.

    Attributes:
        accepted: Number of nucleotides that fit before the overflow.
        required: Length of the rejected input.
        capacity: Capacity of the storage.
    """

    def __init__(self, accepted: int, required: int, capacity: int) -> None:
        self.accepted = accepted
        self.required = required
        self.capacity = capacity
        super().__init__(
            f"{required} nucleotides do not fit into storage of capacity {capacity}; "
            f"accepted {accepted}"
        )


class BufferBorrowError(RuntimeError):
    """A storage buffer was used while lent out, or after its borrower released it."""


__all__ = [
    "SequenceError",
    "InvalidNucleotideError",
    "CapacityExceededError",
    "BufferBorrowError",
]
