# ABOUTME: Unit tests for rich report rendering
# ABOUTME: Tests tier coloring and that tables carry the planned data

import io

from rich.console import Console

from resource_engine.core.resource import Resource, ResourceType
from resource_engine.systems.costs import ResourceCost, ResourcePriority
from resource_engine.systems.health import HealthTier
from resource_engine.systems.spending import plan_spending
from resource_engine.ui.rich_ui import create_resource_table, create_spending_table, tier_color


def render(renderable) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=200, force_terminal=False).print(renderable)
    return buffer.getvalue()


class TestTierColor:
    """Test health tier colors"""

    def test_colors(self):
        """Test each band maps to its color"""
        assert tier_color(HealthTier.DEAD) == "red"
        assert tier_color(HealthTier.CRITICAL) == "red"
        assert tier_color(HealthTier.LOW) == "dark_orange"
        assert tier_color(HealthTier.MODERATE) == "yellow"
        assert tier_color(HealthTier.GOOD) == "green"
        assert tier_color(HealthTier.EXCELLENT) == "green"


class TestTables:
    """Test table contents"""

    def test_resource_table(self):
        """Test resources are listed with tiers"""
        output = render(create_resource_table([Resource(ResourceType.LIFE, 8, 40)]))
        assert "life" in output
        assert "8/40" in output
        assert "CRITICAL" in output

    def test_spending_table(self):
        """Test a plan shows affordable and unaffordable costs"""
        resource = Resource(ResourceType.CREATIVITY, 6, 10)
        strategy = plan_spending(resource, [
            ResourceCost(ResourceType.CREATIVITY, 4, ResourcePriority.CRITICAL, "Shield"),
            ResourceCost(ResourceType.CREATIVITY, 3, ResourcePriority.HIGH, "Fireball"),
        ])
        output = render(create_spending_table(resource, strategy))
        assert "Shield" in output
        assert "affordable" in output
        assert "Fireball" in output
        assert "short (high)" in output
