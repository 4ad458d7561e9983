"""Algorithms for the project."""

from .comparison import format_dna, format_rna, nucleotides_equal
from .transcriber import dna_to_rna, transcribe, transcribe_text
from .validation import check_dna, check_nucleotides, check_rna, find_invalid


__all__ = [
    "format_dna",
    "format_rna",
    "nucleotides_equal",
    "dna_to_rna",
    "transcribe",
    "transcribe_text",
    "check_dna",
    "check_nucleotides",
    "check_rna",
    "find_invalid",
]
