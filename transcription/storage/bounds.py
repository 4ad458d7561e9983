"""Capacity checks shared by the bounded storage backends."""

from __future__ import annotations

import logging
from typing import Optional

from transcription.types.errors import CapacityExceededError
from transcription.types.parameters import OverflowPolicy, active_config

logger = logging.getLogger(__name__)


def resolve_policy(policy: Optional[OverflowPolicy]) -> OverflowPolicy:
    if policy is None:
        return active_config().overflow_policy
    return OverflowPolicy(policy)


def bounded_length(required: int, capacity: int, policy: OverflowPolicy) -> int:
    """Return how many nucleotides to write into storage of ``capacity``.

    Raises CapacityExceededError under the reject policy when ``required``
    does not fit; under the truncate policy returns ``capacity`` instead.
    """
    if required <= capacity:
        return required
    if policy is OverflowPolicy.REJECT:
        raise CapacityExceededError(
            accepted=capacity, required=required, capacity=capacity
        )
    logger.warning(
        "Truncating %d nucleotides to storage capacity %d", required, capacity
    )
    return capacity


__all__ = ["resolve_policy", "bounded_length"]
