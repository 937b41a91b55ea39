# ABOUTME: Reserve policy sizing how much of a resource to hold back from spending
# ABOUTME: Worse health tiers hold back a larger fraction of the maximum

from typing import Optional

from resource_engine.core.resource import Resource
from resource_engine.systems.health import HealthTier, health_of


# Divisor of max_value per tier; tiers not listed hold back a third
_RESERVE_DIVISORS = {
    HealthTier.EXCELLENT: 10,
    HealthTier.GOOD: 8,
    HealthTier.MODERATE: 6,
    HealthTier.LOW: 4,
}
_DEFAULT_DIVISOR = 3


def recommended_reserve(resource: Optional[Resource]) -> int:
    """
    Recommended minimum reserve for a resource in its current state.

    Args:
        resource: Resource to size a reserve for

    Returns:
        max_value divided by 10, 8, 6, 4 or 3 depending on health tier
    """
    if resource is None:
        return 0
    divisor = _RESERVE_DIVISORS.get(health_of(resource), _DEFAULT_DIVISOR)
    return resource.max_value // divisor


def available(resource: Optional[Resource], reserve: int = 0) -> int:
    """Amount that can be spent while keeping the reserve untouched"""
    if resource is None:
        return 0
    return max(0, resource.current_value - reserve)


def has_available(resource: Optional[Resource], amount: int, reserve: int = 0) -> bool:
    """True if the resource covers amount on top of the reserve"""
    return resource is not None and resource.current_value - reserve >= amount
