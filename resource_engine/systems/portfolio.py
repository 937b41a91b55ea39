# ABOUTME: Multi-resource aggregation into overall health and per-resource advice
# ABOUTME: Builds portfolios recommending recover, reduce, maintain, or increase spending

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from resource_engine.core.resource import Resource, ResourceType
from resource_engine.systems.costs import ResourceCost, can_afford
from resource_engine.systems.health import HealthTier, health_of, recovery_priority
from resource_engine.systems.reserve import available, recommended_reserve


logger = logging.getLogger(__name__)


class RecommendedAction(Enum):
    """What an owner should do with one resource given its planned spending"""
    MAINTAIN = "maintain"
    RECOVER_IMMEDIATELY = "recover_immediately"
    RECOVER_BEFORE_SPENDING = "recover_before_spending"
    REDUCE_SPENDING = "reduce_spending"
    CONSIDER_INCREASE_SPENDING = "consider_increase_spending"


_REASONS = {
    RecommendedAction.RECOVER_IMMEDIATELY: "health is critical or worse",
    RecommendedAction.RECOVER_BEFORE_SPENDING: "planned spending would eat into the reserve",
    RecommendedAction.REDUCE_SPENDING: "planned spending exceeds current value",
    RecommendedAction.CONSIDER_INCREASE_SPENDING: "healthy with more than twice the planned spending",
    RecommendedAction.MAINTAIN: "planned spending fits",
}


@dataclass
class OverallResourceHealth:
    """
    Health summary across several resources.

    worst_resource and best_resource are the first resource in input order
    with the lowest and highest tier respectively.
    """
    total_resources: int = 0
    critical_resources: int = 0
    low_resources: int = 0
    healthy_resources: int = 0
    average_percentage: float = 0.0
    worst_resource: Optional[Resource] = None
    best_resource: Optional[Resource] = None

    @property
    def is_in_crisis(self) -> bool:
        return self.critical_resources > 0

    @property
    def needs_attention(self) -> bool:
        """Half or more of the resources are LOW or worse (vacuously true when empty)"""
        return self.critical_resources + self.low_resources >= self.total_resources // 2

    @property
    def health_score(self) -> float:
        """Fraction of resources at GOOD or better"""
        if self.total_resources == 0:
            return 0.0
        return self.healthy_resources / self.total_resources


@dataclass
class ResourceRecommendation:
    """Advice for a single resource within a portfolio"""
    resource_type: ResourceType
    current_health: HealthTier
    planned_spending: int
    recommended_action: RecommendedAction
    reasoning: str = ""
    priority: int = 0


@dataclass
class ResourcePortfolio:
    """Several resources considered together with their planned costs"""
    resources: List[Resource] = field(default_factory=list)
    total_value: int = 0
    overall_health: OverallResourceHealth = field(default_factory=OverallResourceHealth)
    recommendations: List[ResourceRecommendation] = field(default_factory=list)

    def highest_priority_recommendation(self) -> Optional[ResourceRecommendation]:
        """The most urgent recommendation, first in input order on ties"""
        if not self.recommendations:
            return None
        return max(self.recommendations, key=lambda rec: rec.priority)


def _valid(resources: Optional[Iterable[Optional[Resource]]]) -> List[Resource]:
    return [resource for resource in resources or [] if resource is not None]


def _spending_by_type(costs: Optional[Iterable[Optional[ResourceCost]]]) -> Dict[ResourceType, int]:
    totals: Dict[ResourceType, int] = defaultdict(int)
    for cost in costs or []:
        if cost is not None and cost.amount >= 0:
            totals[cost.resource_type] += cost.amount
    return totals


def overall_health(resources: Optional[Iterable[Optional[Resource]]]) -> OverallResourceHealth:
    """
    Summarize the health of several resources.

    Args:
        resources: Resources to summarize (None entries are skipped)

    Returns:
        OverallResourceHealth; an empty summary when there are no resources
    """
    valid = _valid(resources)
    if not valid:
        return OverallResourceHealth()

    tiers = [health_of(resource) for resource in valid]

    return OverallResourceHealth(
        total_resources=len(valid),
        critical_resources=sum(1 for tier in tiers if tier <= HealthTier.CRITICAL),
        low_resources=sum(1 for tier in tiers if tier == HealthTier.LOW),
        healthy_resources=sum(1 for tier in tiers if tier >= HealthTier.GOOD),
        average_percentage=sum(resource.percentage for resource in valid) / len(valid),
        worst_resource=min(valid, key=health_of),
        best_resource=max(valid, key=health_of),
    )


def recommend_action(resource: Resource, planned_spending: int) -> RecommendedAction:
    """
    Pick the action for one resource; the first matching rule wins.

    Args:
        resource: Resource to advise on
        planned_spending: Total planned costs against this resource

    Returns:
        RecommendedAction
    """
    tier = health_of(resource)

    if tier <= HealthTier.CRITICAL:
        return RecommendedAction.RECOVER_IMMEDIATELY
    if tier == HealthTier.LOW and planned_spending > available(resource, recommended_reserve(resource)):
        return RecommendedAction.RECOVER_BEFORE_SPENDING
    if available(resource, 0) < planned_spending:
        return RecommendedAction.REDUCE_SPENDING
    if tier >= HealthTier.GOOD and available(resource, 0) > planned_spending * 2:
        return RecommendedAction.CONSIDER_INCREASE_SPENDING
    return RecommendedAction.MAINTAIN


def optimize_portfolio(resources: Optional[Iterable[Optional[Resource]]],
                       planned_costs: Optional[Iterable[Optional[ResourceCost]]]) -> ResourcePortfolio:
    """
    Build a portfolio with one recommendation per resource.

    Planned costs are summed per resource type; a resource with no matching
    costs is advised with a planned spend of 0.

    Args:
        resources: Resources to consider
        planned_costs: Costs the owner intends to pay this turn

    Returns:
        ResourcePortfolio
    """
    valid = _valid(resources)
    spending = _spending_by_type(planned_costs)

    portfolio = ResourcePortfolio(
        resources=valid,
        total_value=sum(resource.current_value for resource in valid),
        overall_health=overall_health(valid),
    )

    for resource in valid:
        planned = spending.get(resource.resource_type, 0)
        tier = health_of(resource)
        action = recommend_action(resource, planned)

        portfolio.recommendations.append(ResourceRecommendation(
            resource_type=resource.resource_type,
            current_health=tier,
            planned_spending=planned,
            recommended_action=action,
            reasoning=_REASONS[action],
            priority=recovery_priority(tier),
        ))
        logger.debug(f"{resource}: {action.name} (planned {planned})")

    return portfolio


def can_afford_all(resources: Optional[Iterable[Optional[Resource]]],
                   costs: Optional[Iterable[Optional[ResourceCost]]]) -> bool:
    """
    Check a multi-resource cost set against a group of resources.

    Costs are summed per type. Every type needs a resource to pay from;
    when several resources share a type, the first one is used.

    Returns:
        True if every type's total is affordable
    """
    if resources is None or costs is None:
        return False

    by_type: Dict[ResourceType, Resource] = {}
    for resource in _valid(resources):
        by_type.setdefault(resource.resource_type, resource)

    costs = [cost for cost in costs if cost is not None]
    if any(cost.amount < 0 for cost in costs):
        return False

    for resource_type, total in _spending_by_type(costs).items():
        resource = by_type.get(resource_type)
        if resource is None:
            return False
        if not can_afford(resource, ResourceCost(resource_type, total)):
            return False

    return True
