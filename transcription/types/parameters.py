"""
This module defines the alphabets of the two nucleotide sequence roles and the
parameters that choose how RNA values are stored. It includes the canonical DNA
and RNA bases, the storage backends and overflow policies a caller may select,
and a validated configuration container that bundles those choices.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from transcription.constants import (
    DEFAULT_FIXED_CAPACITY,
    DEFAULT_OVERFLOW_POLICY,
    DEFAULT_RNA_STORAGE,
    DEFAULT_TRANSCRIPTION_STORAGE,
)

DNA_BASES: Tuple[str, str, str, str] = ("A", "C", "G", "T")
RNA_BASES: Tuple[str, str, str, str] = ("A", "C", "G", "U")


class Alphabet(Enum):
    """The two 4-symbol nucleotide alphabets."""

    DNA = DNA_BASES
    RNA = RNA_BASES

    @property
    def bases(self) -> Tuple[str, ...]:
        return self.value


class StorageKind(str, Enum):
    """Backends an RNA value can be materialized into."""

    OWNED = "owned"
    FIXED = "fixed"
    BORROWED = "borrowed"
    LAZY = "lazy"


class OverflowPolicy(str, Enum):
    """What bounded storage does with input longer than its capacity."""

    REJECT = "reject"
    TRUNCATE = "truncate"


class Origin(str, Enum):
    """Where the nucleotides held by a lazy RNA value came from."""

    GIVEN_AS_RNA = "given_as_rna"
    DERIVED_FROM_DNA = "derived_from_dna"


def _coerce_enum(value: object, enum_type: type, context: str) -> Enum:
    try:
        return enum_type(value)
    except ValueError:
        allowed = [member.value for member in enum_type]
        raise ValueError(
            f"{context} must be one of {allowed}, got {value!r}"
        ) from None


@dataclass(frozen=True)
class StorageConfig:
    """Default storage choices used when a call does not name its own."""

    rna_storage: StorageKind = StorageKind(DEFAULT_RNA_STORAGE)
    transcription_storage: StorageKind = StorageKind(DEFAULT_TRANSCRIPTION_STORAGE)
    fixed_capacity: int = DEFAULT_FIXED_CAPACITY
    overflow_policy: OverflowPolicy = OverflowPolicy(DEFAULT_OVERFLOW_POLICY)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "rna_storage", _coerce_enum(self.rna_storage, StorageKind, "rna_storage")
        )
        object.__setattr__(
            self,
            "transcription_storage",
            _coerce_enum(self.transcription_storage, StorageKind, "transcription_storage"),
        )
        object.__setattr__(
            self,
            "overflow_policy",
            _coerce_enum(self.overflow_policy, OverflowPolicy, "overflow_policy"),
        )
        # bool is an int subclass, but a capacity of True is a config typo
        if isinstance(self.fixed_capacity, bool) or not isinstance(
            self.fixed_capacity, int
        ):
            raise ValueError(
                f"fixed_capacity must be an integer, got {self.fixed_capacity!r}"
            )
        if self.fixed_capacity < 0:
            raise ValueError(
                f"fixed_capacity must be non-negative, got {self.fixed_capacity}"
            )


_active_config = StorageConfig()


def active_config() -> StorageConfig:
    """Return the process-wide default storage configuration."""
    return _active_config


def set_active_config(config: StorageConfig) -> StorageConfig:
    """Replace the process-wide default configuration; return the previous one."""
    global _active_config
    if not isinstance(config, StorageConfig):
        raise TypeError(f"Expected StorageConfig, got {type(config).__name__}")
    previous = _active_config
    _active_config = config
    return previous


__all__ = [
    "DNA_BASES",
    "RNA_BASES",
    "Alphabet",
    "StorageKind",
    "OverflowPolicy",
    "Origin",
    "StorageConfig",
    "active_config",
    "set_active_config",
]
