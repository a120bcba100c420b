"""Lifecycle weights for financial record statuses."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from stayledger.domain.model import LifecycleStatus

if TYPE_CHECKING:
    from collections.abc import Mapping

# Higher weight = further along the approval pipeline.
STATUS_WEIGHTS: Final[Mapping[LifecycleStatus, int]] = MappingProxyType(
    {
        LifecycleStatus.PAID: 60,
        LifecycleStatus.APPROVED: 50,
        LifecycleStatus.PROCESSING: 40,
        LifecycleStatus.VERIFIED: 30,
        LifecycleStatus.REQUESTED: 20,
        LifecycleStatus.REJECTED: 10,
        LifecycleStatus.DRAFT: 0,
        LifecycleStatus.UNKNOWN: 0,
    }
)


def score(status: str | LifecycleStatus | None) -> int:
    """Return the ordinal weight of ``status``; unrecognised labels score ``0``."""

    return STATUS_WEIGHTS[LifecycleStatus.parse(status)]
