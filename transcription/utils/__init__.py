"""Utility functions for the project."""

from .interop import dna_from_skbio, dna_to_skbio, rna_from_skbio, rna_to_skbio
from .serialization import (
    config_from_dict,
    config_to_dict,
    load_storage_config,
    save_storage_config,
)

__all__ = [
    "dna_from_skbio",
    "dna_to_skbio",
    "rna_from_skbio",
    "rna_to_skbio",
    "config_from_dict",
    "config_to_dict",
    "load_storage_config",
    "save_storage_config",
]
