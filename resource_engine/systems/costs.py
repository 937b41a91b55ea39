# ABOUTME: Typed resource costs and operations with affordability checks
# ABOUTME: Decides whether costs can be paid and applies them, optionally in part

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Iterable, List, Optional

from resource_engine.core.resource import Resource, ResourceType, NON_DEPLETABLE_TYPES
from resource_engine.utils.events import Event, EventBus, EventType


logger = logging.getLogger(__name__)


class ResourcePriority(IntEnum):
    """How important it is that a cost gets paid"""
    VERY_LOW = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    CRITICAL = 5


@dataclass(frozen=True)
class ResourceCost:
    """
    A request to deduct an amount from a resource of a given type.

    Costs are value objects: many may target the same resource type, and
    none of them is ever modified after creation.
    """
    resource_type: ResourceType
    amount: int
    priority: ResourcePriority = ResourcePriority.MEDIUM
    description: str = ""

    @classmethod
    def create(cls, resource_type: ResourceType, amount: int,
               priority: ResourcePriority = ResourcePriority.MEDIUM) -> "ResourceCost":
        return cls(resource_type=resource_type, amount=amount, priority=priority)

    def __str__(self) -> str:
        label = f" ({self.description})" if self.description else ""
        return f"{self.amount} {self.resource_type.value} [{self.priority.name}]{label}"


@dataclass(frozen=True)
class ResourceOperation:
    """
    A signed adjustment used only for outcome prediction.

    Positive amounts are gains, negative amounts are costs. Probability is
    advisory: prediction treats every operation as certain unless the caller
    pre-scales amounts (see expected_operations).
    """
    resource_type: ResourceType
    amount: int
    probability: float = 1.0
    description: str = ""


def _is_valid_cost(cost: Optional[ResourceCost]) -> bool:
    return cost is not None and cost.amount >= 0


def can_afford(resource: Optional[Resource], cost: Optional[ResourceCost]) -> bool:
    """
    Check whether a resource can pay a cost.

    Costs against non-depletable types (life) need strictly more than the
    amount, so paying a cost can never kill.

    Args:
        resource: Resource to pay from
        cost: Cost to check

    Returns:
        True if the cost could be paid in full
    """
    if resource is None or not _is_valid_cost(cost):
        return False

    if cost.resource_type in NON_DEPLETABLE_TYPES:
        return resource.current_value > cost.amount
    return resource.current_value >= cost.amount


def can_afford_combined(resource: Optional[Resource],
                        costs: Optional[Iterable[Optional[ResourceCost]]]) -> bool:
    """
    Check whether a resource can pay all of its matching costs at once.

    Costs for other resource types are ignored; they belong to a different
    resource and must be checked there.

    Args:
        resource: Resource to pay from
        costs: Candidate costs of any type

    Returns:
        True if the summed matching costs are affordable
    """
    if resource is None or costs is None:
        return False

    total = 0
    for cost in costs:
        if cost is None or cost.resource_type != resource.resource_type:
            continue
        if cost.amount < 0:
            return False
        total += cost.amount

    return can_afford(resource, ResourceCost(resource.resource_type, total))


def try_apply_cost(resource: Optional[Resource], cost: Optional[ResourceCost],
                   allow_partial: bool = False,
                   event_bus: Optional[EventBus] = None) -> bool:
    """
    Deduct a cost from a resource if it can be paid.

    When the cost is unaffordable and partial payment is allowed, whatever
    the resource holds is drained to zero and the call still returns False:
    a partial payment is a failure even though funds were consumed.

    Args:
        resource: Resource to pay from (mutated on success or partial payment)
        cost: Cost to pay
        allow_partial: Drain the resource when the full cost cannot be met
        event_bus: Optional bus notified about the outcome

    Returns:
        True only if the full cost was paid
    """
    if resource is None or not _is_valid_cost(cost):
        return False

    if can_afford(resource, cost):
        resource.modify_by(-cost.amount)
        logger.debug(f"Applied {cost} to {resource}")
        _notify(event_bus, EventType.COST_APPLIED, resource, cost, cost.amount)
        return True

    if allow_partial and resource.current_value > 0:
        paid = -resource.modify_by(-resource.current_value)
        logger.debug(f"Partially paid {paid} of {cost}, {resource} drained")
        _notify(event_bus, EventType.COST_PARTIALLY_PAID, resource, cost, paid)
        return False

    logger.debug(f"Rejected {cost} against {resource}")
    _notify(event_bus, EventType.COST_REJECTED, resource, cost, 0)
    return False


def _notify(event_bus: Optional[EventBus], event_type: EventType,
            resource: Resource, cost: ResourceCost, paid: int) -> None:
    if event_bus is None:
        return

    event_bus.emit(Event(
        type=event_type,
        data={
            "resource_type": resource.resource_type.value,
            "amount": cost.amount,
            "paid": paid,
            "priority": cost.priority.name,
            "remaining": resource.current_value,
        }
    ))

    if paid > 0 and resource.current_value == 0:
        event_bus.emit(Event(
            type=EventType.RESOURCE_DEPLETED,
            data={"resource_type": resource.resource_type.value}
        ))


def remaining_cost(cost: Optional[ResourceCost], paid: int) -> Optional[ResourceCost]:
    """
    What is still owed on a cost after a partial payment.

    Args:
        cost: Original cost
        paid: Amount already paid

    Returns:
        A cost of the same type and priority for the rest, or None
    """
    if cost is None:
        return None
    return replace(cost, amount=max(0, cost.amount - paid))


def expected_operations(operations: Optional[Iterable[Optional[ResourceOperation]]]) -> List[ResourceOperation]:
    """
    Pre-scale operations by their probability for expected-value prediction.

    Returns:
        Operations with amount rounded to amount * probability and probability 1.0
    """
    return [
        replace(op, amount=round(op.amount * op.probability), probability=1.0)
        for op in operations or []
        if op is not None
    ]
