# ABOUTME: Unit tests for the budget planner
# ABOUTME: Tests balanced and overbudget verdicts, reserves, and utilization

import pytest
from resource_engine.core.resource import Resource, ResourceType
from resource_engine.systems.budget import BudgetStatus, ResourceBudget, create_budget


class TestCreateBudget:
    """Test budget verdicts"""

    def setup_method(self):
        """6/10 creativity is MODERATE: reserve 1, spendable 5"""
        self.resource = Resource(ResourceType.CREATIVITY, 6, 10)

    def test_balanced_at_limit(self):
        """Test spending exactly the spendable amount is balanced"""
        budget = create_budget(self.resource, 5)
        assert budget.budget_status == BudgetStatus.BALANCED
        assert budget.can_execute_plan is True
        assert budget.total_available == 6
        assert budget.emergency_reserve == 1
        assert budget.available_for_spending == 5
        assert budget.shortfall == 0
        assert budget.surplus == 0

    def test_overbudget(self):
        """Test spending more than spendable is overbudget"""
        budget = create_budget(self.resource, 7)
        assert budget.budget_status == BudgetStatus.OVERBUDGET
        assert budget.can_execute_plan is False
        assert budget.shortfall == 2
        assert budget.surplus == 0

    def test_surplus(self):
        """Test unused capacity is reported as surplus"""
        budget = create_budget(self.resource, 2)
        assert budget.surplus == 3
        assert budget.utilization_rate == pytest.approx(0.4)

    def test_explicit_reserve(self):
        """Test a caller-supplied emergency reserve"""
        budget = create_budget(self.resource, 6, emergency_reserve=0)
        assert budget.emergency_reserve == 0
        assert budget.available_for_spending == 6
        assert budget.budget_status == BudgetStatus.BALANCED

    def test_negative_reserve_uses_recommended(self):
        """Test a negative reserve falls back to the recommendation"""
        assert create_budget(self.resource, 1, emergency_reserve=-1).emergency_reserve == 1

    def test_negative_planned_spending_is_zero(self):
        """Test negative plans count as spending nothing"""
        budget = create_budget(self.resource, -4)
        assert budget.planned_spending == 0
        assert budget.surplus == 5

    def test_never_underbudget(self):
        """Test the planner only ever says BALANCED or OVERBUDGET"""
        for planned in range(0, 12):
            status = create_budget(self.resource, planned).budget_status
            assert status != BudgetStatus.UNDERBUDGET

    def test_none_resource_gives_zero_report(self):
        """Test a missing resource yields an all-zero budget"""
        assert create_budget(None, 3) == ResourceBudget()
        assert create_budget(None, 0, 2) == ResourceBudget()


class TestResourceBudget:
    """Test report properties"""

    def test_underbudget_cannot_execute(self):
        """Test only BALANCED allows execution"""
        assert ResourceBudget(budget_status=BudgetStatus.UNDERBUDGET).can_execute_plan is False

    def test_utilization_with_nothing_available(self):
        """Test utilization is zero when nothing is spendable"""
        assert ResourceBudget(planned_spending=3).utilization_rate == 0.0
