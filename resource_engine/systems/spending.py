# ABOUTME: Greedy spending planner that ranks competing costs by priority
# ABOUTME: Partitions candidate costs into affordable and unaffordable groups

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from resource_engine.core.resource import Resource
from resource_engine.systems.costs import ResourceCost, ResourcePriority
from resource_engine.systems.reserve import available, recommended_reserve


logger = logging.getLogger(__name__)


@dataclass
class SpendingStrategy:
    """
    Result of planning which costs to pay from one resource.

    Attributes:
        available_funds: Spendable amount after the recommended reserve
        recommended_reserve: Amount held back
        remaining_funds: Funds left after paying every affordable cost
        affordable_costs: Costs that fit, in payment order
        unaffordable_high_priority: HIGH or CRITICAL costs that did not fit
        unaffordable_low_priority: Lower-priority costs that did not fit
    """
    available_funds: int = 0
    recommended_reserve: int = 0
    remaining_funds: int = 0
    affordable_costs: List[ResourceCost] = field(default_factory=list)
    unaffordable_high_priority: List[ResourceCost] = field(default_factory=list)
    unaffordable_low_priority: List[ResourceCost] = field(default_factory=list)

    @property
    def has_unaffordable_critical(self) -> bool:
        return any(
            cost.priority == ResourcePriority.CRITICAL
            for cost in self.unaffordable_high_priority
        )

    @property
    def total_affordable_cost(self) -> int:
        return sum(cost.amount for cost in self.affordable_costs)

    @property
    def total_unaffordable_cost(self) -> int:
        return (
            sum(cost.amount for cost in self.unaffordable_high_priority)
            + sum(cost.amount for cost in self.unaffordable_low_priority)
        )


def plan_spending(resource: Optional[Resource],
                  candidate_costs: Optional[Iterable[Optional[ResourceCost]]]) -> SpendingStrategy:
    """
    Decide which candidate costs a resource should pay.

    Costs are ranked by descending priority, then ascending amount, and
    accepted greedily while funds last. This is not an optimal knapsack:
    a cheap low-priority cost never displaces a more important one.

    Args:
        resource: Resource to plan for (never mutated)
        candidate_costs: Costs of any type; other types are ignored

    Returns:
        SpendingStrategy describing the partition
    """
    if resource is None or candidate_costs is None:
        return SpendingStrategy()

    reserve = recommended_reserve(resource)
    funds = available(resource, reserve)

    relevant = [
        cost for cost in candidate_costs
        if cost is not None
        and cost.amount >= 0
        and cost.resource_type == resource.resource_type
    ]
    relevant.sort(key=lambda cost: (-cost.priority, cost.amount))

    strategy = SpendingStrategy(available_funds=funds, recommended_reserve=reserve)
    remaining = funds

    for cost in relevant:
        if remaining >= cost.amount:
            strategy.affordable_costs.append(cost)
            remaining -= cost.amount
        elif cost.priority >= ResourcePriority.HIGH:
            strategy.unaffordable_high_priority.append(cost)
        else:
            strategy.unaffordable_low_priority.append(cost)

    strategy.remaining_funds = remaining

    logger.debug(
        f"Spending plan for {resource}: {len(strategy.affordable_costs)} affordable, "
        f"{len(strategy.unaffordable_high_priority)} high-priority short, "
        f"{remaining} of {funds} left"
    )
    return strategy
