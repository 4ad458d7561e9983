"""Types for the project."""

from .parameters import (
    Alphabet,
    Origin,
    OverflowPolicy,
    StorageConfig,
    StorageKind,
    active_config,
    set_active_config,
)
from .errors import (
    BufferBorrowError,
    CapacityExceededError,
    InvalidNucleotideError,
    SequenceError,
)
from .sequence import Dna, Rna, register_storage, storage_backend


__all__ = [
    "Alphabet",
    "Origin",
    "OverflowPolicy",
    "StorageConfig",
    "StorageKind",
    "active_config",
    "set_active_config",
    "BufferBorrowError",
    "CapacityExceededError",
    "InvalidNucleotideError",
    "SequenceError",
    "Dna",
    "Rna",
    "register_storage",
    "storage_backend",
]
