"""Alphabet membership checks for nucleotide text."""

from __future__ import annotations

import re
from typing import Dict, Optional

from transcription.types.errors import InvalidNucleotideError
from transcription.types.parameters import Alphabet

# One precompiled "first character outside the alphabet" pattern per alphabet
_INVALID_PATTERNS: Dict[Alphabet, "re.Pattern[str]"] = {
    alphabet: re.compile(f"[^{''.join(alphabet.bases)}]") for alphabet in Alphabet
}


def find_invalid(text: str, alphabet: Alphabet) -> Optional[int]:
    """Return the 0-based index of the first character not in ``alphabet``.

    Returns None when every character is a member. Membership is checked
    against the requested alphabet only, so ``U`` is invalid DNA and ``T`` is
    invalid RNA. Matching is case-sensitive.
    """
    if not isinstance(text, str):
        raise TypeError(f"Nucleotides must be given as str, not {type(text).__name__}")
    match = _INVALID_PATTERNS[alphabet].search(text)
    if match is None:
        return None
    return match.start()


def check_nucleotides(text: str, alphabet: Alphabet) -> None:
    """Raise InvalidNucleotideError if ``text`` has a character outside ``alphabet``."""
    index = find_invalid(text, alphabet)
    if index is not None:
        raise InvalidNucleotideError(index, text[index], alphabet)


def check_dna(text: str) -> None:
    """Validate DNA nucleotides (A, C, G, T)."""
    check_nucleotides(text, Alphabet.DNA)


def check_rna(text: str) -> None:
    """Validate RNA nucleotides (A, C, G, U)."""
    check_nucleotides(text, Alphabet.RNA)


__all__ = ["find_invalid", "check_nucleotides", "check_dna", "check_rna"]
