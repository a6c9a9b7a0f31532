"""Threshold tier lookups shared by the tiered scoring bonuses."""

from __future__ import annotations

from typing import Sequence, TypeVar

Tier = tuple[float, int]
T = TypeVar("T", bound=tuple)


def first_matching_tier(value: float | None, tiers: Sequence[Tier], default: int = 0) -> int:
    """Return the points of the first tier whose threshold ``value`` meets.

    ``tiers`` is ordered by threshold, highest first, so the highest satisfied
    tier wins. A missing or zero value earns ``default``.
    """
    if not value:
        return default
    for threshold, points in tiers:
        if value >= threshold:
            return points
    return default


def validate_tiers(tiers: Sequence[Tier]) -> None:
    """Raise ``ValueError`` unless thresholds are strictly descending."""
    thresholds = [threshold for threshold, _ in tiers]
    if any(later >= earlier for earlier, later in zip(thresholds, thresholds[1:])):
        raise ValueError(f"tier thresholds must be strictly descending: {thresholds}")


def first_tier_within(value: float, tiers: Sequence[T]) -> T | None:
    """Return the first tier whose ceiling ``value`` does not exceed.

    ``tiers`` is ordered by ceiling, lowest first, and each tier starts with
    its ceiling; the rest of the tuple is returned untouched. ``None`` means
    the value is past every ceiling.
    """
    for tier in tiers:
        if value <= tier[0]:
            return tier
    return None


def validate_ascending_tiers(tiers: Sequence[tuple]) -> None:
    """Raise ``ValueError`` unless ceilings are strictly ascending."""
    ceilings = [tier[0] for tier in tiers]
    if any(later <= earlier for earlier, later in zip(ceilings, ceilings[1:])):
        raise ValueError(f"tier ceilings must be strictly ascending: {ceilings}")
