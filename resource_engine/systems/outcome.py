# ABOUTME: Read-only outcome prediction for hypothetical resource operations
# ABOUTME: Projects value and health tier after a sequence of gains and costs

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from resource_engine.core.resource import Resource
from resource_engine.systems.costs import ResourceOperation
from resource_engine.systems.health import HealthTier, classify, health_of


logger = logging.getLogger(__name__)


@dataclass
class ResourceOutcome:
    """
    Projected state of a resource after a set of operations.

    health_change is the signed number of tiers moved (positive = better).
    """
    initial_value: int = 0
    initial_health: HealthTier = HealthTier.DEAD
    projected_value: int = 0
    projected_percentage: float = 0.0
    projected_health: HealthTier = HealthTier.DEAD
    health_change: int = 0
    is_improvement: bool = False
    is_critical_change: bool = False
    operations: List[ResourceOperation] = field(default_factory=list)

    @property
    def is_risky(self) -> bool:
        return self.projected_health <= HealthTier.CRITICAL

    @property
    def is_significant_change(self) -> bool:
        return abs(self.projected_value - self.initial_value) > self.initial_value * 0.25


def predict_outcome(resource: Optional[Resource],
                    operations: Optional[Iterable[Optional[ResourceOperation]]]) -> ResourceOutcome:
    """
    Simulate operations against a resource without changing it.

    Only operations for the resource's own type count. Probability is
    ignored; use expected_operations() first for expected-value semantics.

    Args:
        resource: Resource to project (never mutated)
        operations: Signed operations of any type

    Returns:
        ResourceOutcome with projected value, tier and risk flags
    """
    if resource is None:
        return ResourceOutcome()

    outcome = ResourceOutcome(
        initial_value=resource.current_value,
        initial_health=health_of(resource),
    )

    projected = resource.current_value
    for operation in operations or []:
        if operation is not None and operation.resource_type == resource.resource_type:
            projected += operation.amount
            outcome.operations.append(operation)

    projected = max(0, min(projected, resource.max_value))

    outcome.projected_value = projected
    if resource.max_value > 0:
        outcome.projected_percentage = projected / resource.max_value
    if projected > 0:
        outcome.projected_health = classify(outcome.projected_percentage)

    outcome.health_change = int(outcome.projected_health) - int(outcome.initial_health)
    outcome.is_improvement = projected > outcome.initial_value
    outcome.is_critical_change = abs(outcome.health_change) >= 2

    logger.debug(
        f"Predicted {resource} -> {projected} ({outcome.projected_health.name}, "
        f"{outcome.health_change:+d} tiers)"
    )
    return outcome
