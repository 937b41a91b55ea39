# ABOUTME: Rich UI utilities for rendering resource reports in the terminal
# ABOUTME: Provides health-colored tables and panels for plans, budgets, and outcomes

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.align import Align
from rich.style import Style

from resource_engine.core.resource import Resource
from resource_engine.systems.budget import ResourceBudget
from resource_engine.systems.health import HealthTier, health_of
from resource_engine.systems.outcome import ResourceOutcome
from resource_engine.systems.portfolio import OverallResourceHealth, ResourcePortfolio
from resource_engine.systems.spending import SpendingStrategy


console = Console()


def set_console(new_console: Console) -> None:
    """Replace the module console (e.g. with a log-teeing console)."""
    global console
    console = new_console


def tier_color(tier: HealthTier) -> str:
    """Display color for a health tier"""
    if tier <= HealthTier.CRITICAL:
        return "red"
    if tier == HealthTier.LOW:
        return "dark_orange"
    if tier == HealthTier.MODERATE:
        return "yellow"
    return "green"


def format_tier(tier: HealthTier) -> str:
    color = tier_color(tier)
    return f"[{color}]{tier.name}[/{color}]"


def print_title(title: str, subtitle: Optional[str] = None) -> None:
    """Display a styled title panel.

    Args:
        title: Main title text
        subtitle: Optional subtitle text
    """
    content = f"{title}\n[dim]{subtitle}[/dim]" if subtitle else title
    console.print(Panel(
        Align.center(content),
        style=Style(color="cyan", bold=True),
        expand=False,
        padding=(1, 2)
    ))


def create_resource_table(resources: List[Resource]) -> Table:
    """Create a table of resources with their health tiers.

    Args:
        resources: Resources to list

    Returns:
        Formatted Rich Table
    """
    table = Table(title="RESOURCES", style="cyan", show_header=True, header_style="bold magenta")
    table.add_column("Resource", style="bold")
    table.add_column("Value", justify="center")
    table.add_column("Percent", justify="right")
    table.add_column("Health", justify="center")

    for resource in resources:
        tier = health_of(resource)
        color = tier_color(tier)
        table.add_row(
            resource.resource_type.value,
            f"[{color}]{resource.current_value}/{resource.max_value}[/{color}]",
            f"{resource.percentage:.0%}",
            format_tier(tier),
        )

    return table


def create_overall_health_panel(summary: OverallResourceHealth) -> Panel:
    """Summarize overall health in a panel."""
    lines = [
        f"Resources: {summary.total_resources}  "
        f"critical: {summary.critical_resources}  "
        f"low: {summary.low_resources}  "
        f"healthy: {summary.healthy_resources}",
        f"Average fill: {summary.average_percentage:.0%}  "
        f"Health score: {summary.health_score:.0%}",
    ]
    if summary.worst_resource is not None:
        lines.append(f"Worst: {summary.worst_resource}  Best: {summary.best_resource}")
    if summary.is_in_crisis:
        lines.append("[bold red]⚠ In crisis[/bold red]")
    elif summary.needs_attention:
        lines.append("[yellow]● Needs attention[/yellow]")

    return Panel("\n".join(lines), title="[bold]OVERALL HEALTH[/bold]", style="cyan", expand=False)


def create_spending_table(resource: Resource, strategy: SpendingStrategy) -> Table:
    """Create a table of a spending plan, in payment order.

    Args:
        resource: Resource the plan was made for
        strategy: Planned strategy

    Returns:
        Formatted Rich Table
    """
    table = Table(
        title=f"SPENDING PLAN: {resource.resource_type.value}",
        caption=f"{resource} reserve {strategy.recommended_reserve}, "
                f"funds {strategy.available_funds}, left {strategy.remaining_funds}",
        style="green", show_header=True, header_style="bold magenta"
    )
    table.add_column("Cost", style="bold")
    table.add_column("Priority", justify="center")
    table.add_column("Status", justify="center")

    groups = (
        (strategy.affordable_costs, "[green]✓ affordable[/green]"),
        (strategy.unaffordable_high_priority, "[red]✗ short (high)[/red]"),
        (strategy.unaffordable_low_priority, "[dim]✗ short (low)[/dim]"),
    )
    for costs, status in groups:
        for cost in costs:
            table.add_row(
                f"{cost.amount} {cost.description}".strip(),
                cost.priority.name,
                status,
            )

    return table


def create_budget_panel(resource: Resource, budget: ResourceBudget) -> Panel:
    """Render a budget verdict."""
    color = "green" if budget.can_execute_plan else "red"
    content = (
        f"Planned {budget.planned_spending} / spendable {budget.available_for_spending} "
        f"(reserve {budget.emergency_reserve})\n"
        f"[{color}]{budget.budget_status.name}[/{color}]  "
        f"shortfall {budget.shortfall}  surplus {budget.surplus}  "
        f"utilization {budget.utilization_rate:.0%}"
    )
    return Panel(content, title=f"[bold]BUDGET: {resource}[/bold]", style=color, expand=False)


def create_outcome_panel(resource: Resource, outcome: ResourceOutcome) -> Panel:
    """Render a predicted outcome."""
    content = (
        f"{outcome.initial_value} ({format_tier(outcome.initial_health)}) → "
        f"{outcome.projected_value} ({format_tier(outcome.projected_health)}), "
        f"{outcome.health_change:+d} tiers"
    )
    flags = []
    if outcome.is_risky:
        flags.append("[bold red]risky[/bold red]")
    if outcome.is_critical_change:
        flags.append("[yellow]critical change[/yellow]")
    if outcome.is_significant_change:
        flags.append("significant")
    if flags:
        content += "\n" + ", ".join(flags)

    return Panel(content, title=f"[bold]OUTCOME: {resource}[/bold]", style="blue", expand=False)


def create_portfolio_table(portfolio: ResourcePortfolio) -> Table:
    """Create a table of per-resource recommendations.

    Args:
        portfolio: Portfolio to render

    Returns:
        Formatted Rich Table
    """
    table = Table(title="PORTFOLIO", style="magenta", show_header=True, header_style="bold magenta")
    table.add_column("Resource", style="bold")
    table.add_column("Health", justify="center")
    table.add_column("Planned", justify="right")
    table.add_column("Action")
    table.add_column("Priority", justify="right")

    for rec in portfolio.recommendations:
        table.add_row(
            rec.resource_type.value,
            format_tier(rec.current_health),
            str(rec.planned_spending),
            f"{rec.recommended_action.name} [dim]{rec.reasoning}[/dim]",
            str(rec.priority),
        )

    return table


def print_status_message(message: str, message_type: str = "info") -> None:
    """Print a styled status message.

    Args:
        message: Message text
        message_type: Type of message (info, success, warning, error)
    """
    colors = {
        "info": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "red",
    }
    symbols = {
        "info": "ℹ",
        "success": "✓",
        "warning": "⚠",
        "error": "✗",
    }

    color = colors.get(message_type, colors["info"])
    symbol = symbols.get(message_type, "•")
    style = Style(color=color, bold=(message_type == "error"))

    console.print(f"[{color}]{symbol}[/{color}] {message}", style=style)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print an error message with optional exception details."""
    console.print(f"[bold red]✗ ERROR:[/bold red] {message}")
    if error:
        console.print(f"[dim red]{str(error)}[/dim red]")
