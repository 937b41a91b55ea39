# ABOUTME: Unit tests for the greedy spending planner
# ABOUTME: Tests ordering, partitioning, reserve handling, and purity

from resource_engine.core.resource import Resource, ResourceType
from resource_engine.systems.costs import ResourceCost, ResourcePriority
from resource_engine.systems.spending import SpendingStrategy, plan_spending


def creativity(amount: int, priority: ResourcePriority = ResourcePriority.MEDIUM) -> ResourceCost:
    return ResourceCost.create(ResourceType.CREATIVITY, amount, priority)


def five_funds() -> Resource:
    """6/10 is MODERATE, so the reserve is 10 // 6 = 1 and funds are 5"""
    return Resource(ResourceType.CREATIVITY, 6, 10)


class TestPlanSpending:
    """Test the greedy walk"""

    def test_priority_beats_cost(self):
        """Test the Critical(4), High(3), Low(2) walk with five funds"""
        high = creativity(3, ResourcePriority.HIGH)
        critical = creativity(4, ResourcePriority.CRITICAL)
        low = creativity(2, ResourcePriority.LOW)

        strategy = plan_spending(five_funds(), [high, critical, low])

        assert strategy.available_funds == 5
        assert strategy.recommended_reserve == 1
        assert strategy.affordable_costs == [critical]
        assert strategy.unaffordable_high_priority == [high]
        assert strategy.unaffordable_low_priority == [low]
        assert strategy.remaining_funds == 1
        assert strategy.has_unaffordable_critical is False

    def test_cheaper_first_within_priority(self):
        """Test equal priorities are paid cheapest first"""
        costs = [creativity(3), creativity(1), creativity(2)]

        strategy = plan_spending(five_funds(), costs)

        assert [c.amount for c in strategy.affordable_costs] == [1, 2]
        assert [c.amount for c in strategy.unaffordable_low_priority] == [3]
        assert strategy.remaining_funds == 2

    def test_unaffordable_critical_flag(self):
        """Test an unpaid critical cost is flagged"""
        strategy = plan_spending(five_funds(), [creativity(6, ResourcePriority.CRITICAL)])
        assert strategy.has_unaffordable_critical is True
        assert strategy.remaining_funds == 5

    def test_high_priority_partition(self):
        """Test every unpaid high-priority entry is HIGH or above"""
        costs = [
            creativity(4, ResourcePriority.HIGH),
            creativity(4, ResourcePriority.CRITICAL),
            creativity(4, ResourcePriority.MEDIUM),
            creativity(4, ResourcePriority.VERY_LOW),
        ]
        strategy = plan_spending(five_funds(), costs)

        assert [c.priority for c in strategy.affordable_costs] == [ResourcePriority.CRITICAL]
        assert all(c.priority >= ResourcePriority.HIGH for c in strategy.unaffordable_high_priority)
        assert len(strategy.unaffordable_low_priority) == 2

    def test_affordable_total_within_funds(self):
        """Test accepted costs never exceed available funds"""
        costs = [creativity(n, p) for n in range(1, 5) for p in ResourcePriority]
        strategy = plan_spending(five_funds(), costs)

        assert strategy.total_affordable_cost <= strategy.available_funds
        assert strategy.remaining_funds == strategy.available_funds - strategy.total_affordable_cost
        assert strategy.total_affordable_cost + strategy.total_unaffordable_cost == sum(
            c.amount for c in costs
        )

    def test_ignores_other_types_and_invalid_costs(self):
        """Test foreign, missing and negative costs are dropped"""
        costs = [
            ResourceCost.create(ResourceType.LIFE, 1, ResourcePriority.CRITICAL),
            None,
            creativity(-2),
            creativity(2),
        ]
        strategy = plan_spending(five_funds(), costs)

        assert [c.amount for c in strategy.affordable_costs] == [2]
        assert strategy.unaffordable_high_priority == []
        assert strategy.unaffordable_low_priority == []

    def test_does_not_mutate_resource(self):
        """Test planning leaves the resource untouched"""
        resource = five_funds()
        plan_spending(resource, [creativity(3), creativity(2)])
        assert resource.current_value == 6

    def test_repeatable(self):
        """Test identical inputs give identical plans"""
        resource = five_funds()
        costs = [creativity(3, ResourcePriority.HIGH), creativity(2)]
        assert plan_spending(resource, costs) == plan_spending(resource, costs)

    def test_reserve_limits_funds(self):
        """Test a critical resource keeps a third of its maximum"""
        resource = Resource(ResourceType.CREATIVITY, 2, 10)  # CRITICAL, reserve 3
        strategy = plan_spending(resource, [creativity(1, ResourcePriority.CRITICAL)])
        assert strategy.available_funds == 0
        assert strategy.has_unaffordable_critical is True

    def test_invalid_inputs(self):
        """Test missing inputs give an empty plan"""
        assert plan_spending(None, [creativity(1)]) == SpendingStrategy()
        assert plan_spending(five_funds(), None) == SpendingStrategy()
