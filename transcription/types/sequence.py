"""Sequence types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Iterator, Optional, Tuple, Type, Union

from transcription.algorithms.comparison import format_dna, format_rna, nucleotides_equal
from transcription.algorithms.validation import check_dna
from transcription.types.parameters import StorageConfig, StorageKind, active_config

StorageSelector = Union[StorageKind, str, None]

_STORAGE_BACKENDS: Dict[StorageKind, Type["Rna"]] = {}


def register_storage(kind: StorageKind) -> Callable[[Type["Rna"]], Type["Rna"]]:
    """Class decorator registering an Rna backend under ``kind``."""

    def decorator(cls: Type["Rna"]) -> Type["Rna"]:
        cls.kind = kind
        _STORAGE_BACKENDS[kind] = cls
        return cls

    return decorator


def storage_backend(kind: StorageSelector) -> Type["Rna"]:
    """Return the Rna backend class registered for ``kind``."""
    kind = StorageKind(kind)
    if kind not in _STORAGE_BACKENDS:
        raise KeyError(f"No RNA storage backend registered for {kind.value!r}")
    return _STORAGE_BACKENDS[kind]


def _select_backend(
    storage: StorageSelector,
    capacity: Optional[int],
    buffer: Any,
    default: StorageKind,
    config: StorageConfig,
) -> Tuple[Type["Rna"], Dict[str, Any]]:
    """Resolve a storage selector plus backend-specific options."""
    if storage is not None:
        kind = StorageKind(storage)
    elif buffer is not None:
        kind = StorageKind.BORROWED
    elif capacity is not None:
        kind = StorageKind.FIXED
    else:
        kind = default

    options: Dict[str, Any] = {}
    if kind is StorageKind.FIXED:
        options["capacity"] = config.fixed_capacity if capacity is None else capacity
    elif capacity is not None:
        raise TypeError(f"capacity does not apply to {kind.value} storage")

    if kind is StorageKind.BORROWED:
        if buffer is None:
            raise TypeError("borrowed storage requires a buffer")
        options["buffer"] = buffer
    elif buffer is not None:
        raise TypeError(f"buffer does not apply to {kind.value} storage")

    if kind in (StorageKind.FIXED, StorageKind.BORROWED):
        options["policy"] = config.overflow_policy
    return storage_backend(kind), options


@dataclass(frozen=True, repr=False)
class Dna:
    """Validated DNA nucleotides (A, C, G, T).

    DNA is read-only input: the instance keeps a reference to the given text and
    never copies or modifies it.
    """

    nucleotides: str

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def new(cls, nucleotides: str) -> "Dna":
        """Validate DNA nucleotides; same as ``Dna(nucleotides)``."""
        return cls(nucleotides)

    def _validate(self) -> None:
        check_dna(self.nucleotides)

    def __len__(self) -> int:
        return len(self.nucleotides)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nucleotides)

    def __str__(self) -> str:
        return self.nucleotides

    def __repr__(self) -> str:
        return format_dna(self.nucleotides)

    def into_rna(
        self,
        storage: StorageSelector = None,
        *,
        capacity: Optional[int] = None,
        buffer: Any = None,
        config: Optional[StorageConfig] = None,
    ) -> "Rna":
        """Transcribe into an RNA value held by the selected storage backend.

        Args:
            storage: Backend to use. Defaults to ``buffer`` -> borrowed,
                ``capacity`` -> fixed, otherwise the configured
                ``transcription_storage`` (lazy unless reconfigured).
            capacity: Capacity of fixed storage.
            buffer: StorageBuffer lent to borrowed storage.
            config: Overrides the active StorageConfig for this call.
        """
        config = config or active_config()
        backend, options = _select_backend(
            storage, capacity, buffer, config.transcription_storage, config
        )
        return backend.from_dna(self, **options)


class Rna(ABC):
    """RNA nucleotides (A, C, G, U), independent of how they are stored.

    Subclasses are storage backends. All of them share one value semantics:
    two instances are equal iff they yield the same nucleotides, whatever their
    backend or capacity, and all render as ``Rna("...")``.
    """

    kind: ClassVar[StorageKind]

    # Equal values of different backends must not hash differently, and some
    # backends are mutable.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def new(
        cls,
        nucleotides: str,
        storage: StorageSelector = None,
        *,
        capacity: Optional[int] = None,
        buffer: Any = None,
        config: Optional[StorageConfig] = None,
    ) -> "Rna":
        """Validate RNA nucleotides and store them in the selected backend.

        Storage selection works as in Dna.into_rna, except the fallback is the
        configured ``rna_storage`` (owned unless reconfigured).
        """
        config = config or active_config()
        backend, options = _select_backend(
            storage, capacity, buffer, config.rna_storage, config
        )
        return backend.from_text(nucleotides, **options)

    @classmethod
    @abstractmethod
    def from_text(cls, nucleotides: str, **options: Any) -> "Rna":
        """Validate ``nucleotides`` against the RNA alphabet and store them."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_dna(cls, dna: Dna, **options: Any) -> "Rna":
        """Store the transcription of already validated DNA."""
        raise NotImplementedError

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Yield the logical nucleotides, never unused capacity."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def copy(self) -> "Rna":
        """Return an equal value that shares no mutable storage with ``self``."""
        raise NotImplementedError

    def __copy__(self) -> "Rna":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Rna":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rna):
            return NotImplemented
        return nucleotides_equal(self, other)

    def __str__(self) -> str:
        return "".join(self)

    def __repr__(self) -> str:
        return format_rna(self)

    def to_owned(self) -> "Rna":
        """Return an owned, growable copy of this value."""
        return storage_backend(StorageKind.OWNED).from_text(str(self))


__all__ = [
    "Dna",
    "Rna",
    "StorageSelector",
    "register_storage",
    "storage_backend",
]
