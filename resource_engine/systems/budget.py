# ABOUTME: Budget planner comparing a planned expenditure against spendable funds
# ABOUTME: Produces balanced/overbudget verdicts with shortfall and surplus

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from resource_engine.core.resource import Resource
from resource_engine.systems.reserve import available, recommended_reserve


logger = logging.getLogger(__name__)


class BudgetStatus(Enum):
    """
    Verdict of a budget check.

    UNDERBUDGET is reserved for a future planner that flags unused capacity;
    create_budget never produces it.
    """
    BALANCED = "balanced"
    OVERBUDGET = "overbudget"
    UNDERBUDGET = "underbudget"


@dataclass
class ResourceBudget:
    """Planned spending measured against what a resource can spare"""
    total_available: int = 0
    emergency_reserve: int = 0
    planned_spending: int = 0
    available_for_spending: int = 0
    shortfall: int = 0
    surplus: int = 0
    budget_status: BudgetStatus = BudgetStatus.BALANCED

    @property
    def can_execute_plan(self) -> bool:
        return self.budget_status == BudgetStatus.BALANCED

    @property
    def utilization_rate(self) -> float:
        """Planned spending as a fraction of spendable funds"""
        if self.available_for_spending <= 0:
            return 0.0
        return self.planned_spending / self.available_for_spending


def create_budget(resource: Optional[Resource], planned_spending: int,
                  emergency_reserve: Optional[int] = None) -> ResourceBudget:
    """
    Check a planned expenditure against a resource.

    Args:
        resource: Resource to spend from
        planned_spending: Total amount the caller intends to spend
        emergency_reserve: Amount to hold back. Defaults to the recommended
                           reserve for the resource's health tier.

    Returns:
        ResourceBudget with status, shortfall and surplus
    """
    if resource is None:
        return ResourceBudget()

    if emergency_reserve is None or emergency_reserve < 0:
        emergency_reserve = recommended_reserve(resource)

    planned_spending = max(0, planned_spending)
    spendable = available(resource, emergency_reserve)

    if planned_spending <= spendable:
        status = BudgetStatus.BALANCED
    else:
        status = BudgetStatus.OVERBUDGET

    budget = ResourceBudget(
        total_available=resource.current_value,
        emergency_reserve=emergency_reserve,
        planned_spending=planned_spending,
        available_for_spending=spendable,
        shortfall=max(0, planned_spending - spendable),
        surplus=max(0, spendable - planned_spending),
        budget_status=status,
    )

    logger.debug(
        f"Budget for {resource}: planned {planned_spending} vs {spendable} "
        f"spendable -> {status.name}"
    )
    return budget
