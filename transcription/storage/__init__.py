"""RNA storage backends.

Importing this package registers every backend with ``Rna.new`` and
``Dna.into_rna``.
"""

from .owned import OwnedRna
from .fixed import FixedRna
from .borrowed import BorrowedRna, StorageBuffer
from .lazy import LazyRna


__all__ = [
    "OwnedRna",
    "FixedRna",
    "BorrowedRna",
    "StorageBuffer",
    "LazyRna",
]
