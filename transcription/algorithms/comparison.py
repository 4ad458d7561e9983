"""Representation-independent equality and rendering of RNA values.

Every storage backend exposes its value as an iterable of RNA nucleotides
(a stored slice for eager backends, an on-the-fly transcription for the lazy
one). Comparison and formatting only ever go through that iterable, never
through a backend's raw storage, so unused capacity cannot influence either.
"""

from __future__ import annotations

from collections.abc import Sized
from itertools import zip_longest
from typing import Iterable

_MISSING = object()


def nucleotides_equal(left: Iterable[str], right: Iterable[str]) -> bool:
    """Compare two nucleotide streams element-wise, stopping at the first mismatch.

    When both sides know their length a length mismatch is answered without
    iterating. Neither side is materialized.
    """
    if isinstance(left, Sized) and isinstance(right, Sized):
        if len(left) != len(right):
            return False
    for ours, theirs in zip_longest(left, right, fillvalue=_MISSING):
        if ours != theirs:
            return False
    return True


def format_rna(nucleotides: Iterable[str]) -> str:
    """Render nucleotides in the canonical debug form ``Rna("...")``."""
    return f'Rna("{"".join(nucleotides)}")'


def format_dna(nucleotides: Iterable[str]) -> str:
    """Render nucleotides in the canonical debug form ``Dna("...")``."""
    return f'Dna("{"".join(nucleotides)}")'


__all__ = ["nucleotides_equal", "format_rna", "format_dna"]
