# ABOUTME: Health tier classification for bounded resources
# ABOUTME: Maps fill percentage to tiers, urgency levels, and recovery priorities

from enum import IntEnum
from typing import Optional

from resource_engine.core.resource import Resource


class HealthTier(IntEnum):
    """
    Ordered classification of how full a resource is.

    Ordinals are stable: outcome prediction subtracts them to measure
    how many tiers a plan moves a resource.
    """
    DEAD = 0
    DYING = 1
    CRITICAL = 2
    LOW = 3
    MODERATE = 4
    GOOD = 5
    EXCELLENT = 6


class ResourceUrgency(IntEnum):
    """How soon a resource needs recovery attention"""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    IMMEDIATE = 4


# Inclusive lower bounds, evaluated top-down
TIER_THRESHOLDS = (
    (0.90, HealthTier.EXCELLENT),
    (0.75, HealthTier.GOOD),
    (0.50, HealthTier.MODERATE),
    (0.25, HealthTier.LOW),
    (0.10, HealthTier.CRITICAL),
)

_URGENCY_BY_TIER = {
    HealthTier.DEAD: ResourceUrgency.IMMEDIATE,
    HealthTier.DYING: ResourceUrgency.IMMEDIATE,
    HealthTier.CRITICAL: ResourceUrgency.HIGH,
    HealthTier.LOW: ResourceUrgency.MEDIUM,
    HealthTier.MODERATE: ResourceUrgency.LOW,
    HealthTier.GOOD: ResourceUrgency.NONE,
    HealthTier.EXCELLENT: ResourceUrgency.NONE,
}

_PRIORITY_BY_URGENCY = {
    ResourceUrgency.IMMEDIATE: 100,
    ResourceUrgency.HIGH: 75,
    ResourceUrgency.MEDIUM: 50,
    ResourceUrgency.LOW: 25,
    ResourceUrgency.NONE: 0,
}


def classify(percentage: float) -> HealthTier:
    """
    Classify a fill percentage into a health tier.

    Args:
        percentage: current / max, normally in [0.0, 1.0]

    Returns:
        The matching HealthTier
    """
    for threshold, tier in TIER_THRESHOLDS:
        if percentage >= threshold:
            return tier
    if percentage > 0:
        return HealthTier.DYING
    return HealthTier.DEAD


def health_of(resource: Optional[Resource]) -> HealthTier:
    """
    Classify a resource.

    An empty (or missing) resource is always DEAD, whatever its maximum.
    This check runs before the threshold table so a 0/0 resource can
    never be classified as alive.

    Args:
        resource: Resource to classify

    Returns:
        The resource's HealthTier
    """
    if is_exhausted(resource):
        return HealthTier.DEAD
    return classify(resource.percentage)


def urgency(tier: HealthTier) -> ResourceUrgency:
    """Urgency of recovering a resource in the given tier"""
    return _URGENCY_BY_TIER[tier]


def recovery_priority(tier: HealthTier) -> int:
    """
    Sortable recovery score for a tier (0, 25, 50, 75 or 100).

    Only used for ordering recommendations and for logging.
    """
    return _PRIORITY_BY_URGENCY[urgency(tier)]


def is_in_critical_state(resource: Optional[Resource], threshold: float = 0.2) -> bool:
    """True if the resource is alive but at or below the threshold fraction"""
    return (
        resource is not None
        and resource.current_value > 0
        and resource.percentage <= threshold
    )


def is_healthy(resource: Optional[Resource], threshold: float = 0.6) -> bool:
    """True if the resource is at or above the threshold fraction"""
    return resource is not None and resource.percentage >= threshold


def is_exhausted(resource: Optional[Resource]) -> bool:
    """True if the resource is missing or has nothing left"""
    return resource is None or resource.current_value <= 0


def is_at_maximum(resource: Optional[Resource]) -> bool:
    """True if the resource is full"""
    return resource is not None and resource.current_value >= resource.max_value


def optimal_recovery(resource: Optional[Resource], max_recovery: int) -> int:
    """
    Recommend how much of a resource to restore.

    Dead and dying resources are restored in full; healthier resources get
    a progressively smaller share of their maximum, never more than what is
    missing.

    Args:
        resource: Resource to recover
        max_recovery: Upper bound on the recovery the caller can provide

    Returns:
        Recommended recovery amount (never negative)
    """
    if resource is None:
        return 0

    maximum = resource.max_value
    missing = maximum - resource.current_value
    tier = health_of(resource)

    if tier <= HealthTier.DYING:
        recommended = maximum
    elif tier == HealthTier.CRITICAL:
        recommended = min(missing, maximum // 2)
    elif tier == HealthTier.LOW:
        recommended = min(missing, maximum // 3)
    else:
        recommended = min(missing, maximum // 4)

    return max(0, min(recommended, max_recovery))
