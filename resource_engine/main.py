# ABOUTME: Command-line entry point for analyzing resource scenarios
# ABOUTME: Loads a JSON snapshot and prints health, plans, budgets, outcomes, and portfolio

import argparse
import os
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from resource_engine.rules.loader import Scenario, ScenarioLoader
from resource_engine.systems.budget import create_budget
from resource_engine.systems.costs import ResourceCost, expected_operations
from resource_engine.systems.outcome import predict_outcome
from resource_engine.systems.portfolio import optimize_portfolio
from resource_engine.systems.spending import plan_spending
from resource_engine.ui import rich_ui
from resource_engine.ui.rich_ui import (
    create_budget_panel,
    create_outcome_panel,
    create_overall_health_panel,
    create_portfolio_table,
    create_resource_table,
    create_spending_table,
    print_error,
    print_status_message,
    print_title,
)
from resource_engine.utils.logging_config import get_logging_config, init_logging


VERSION = "0.1.0"

TRUTHY = {"1", "true", "yes", "on"}


def parse_arguments() -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Resource health, spending and outcome analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resource-engine turn.json               # Full report for a scenario
  resource-engine turn.json --expected    # Weight operations by probability
  resource-engine turn.json --reserve 2   # Fixed emergency reserve for budgets
  resource-engine turn.json --debug       # Enable debug logging
        """
    )

    parser.add_argument(
        "scenario",
        type=Path,
        help="Path to a JSON scenario file"
    )

    parser.add_argument(
        "--expected",
        action="store_true",
        help="Scale predicted operations by their probability"
    )

    parser.add_argument(
        "--reserve",
        type=int,
        default=None,
        help="Emergency reserve for budgets (default: recommended reserve per resource)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with file logging (or set RESOURCE_ENGINE_DEBUG)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"resource-engine v{VERSION}"
    )

    return parser.parse_args()


def debug_enabled(args: argparse.Namespace) -> bool:
    """Debug mode from the --debug flag or the RESOURCE_ENGINE_DEBUG variable"""
    if args.debug:
        return True
    return os.getenv("RESOURCE_ENGINE_DEBUG", "").strip().lower() in TRUTHY


def planned_costs(scenario: Scenario) -> List[ResourceCost]:
    """
    Costs to plan against, per resource type.

    An explicit planned_spending entry replaces the scenario's costs for
    that type.
    """
    costs = [
        cost for cost in scenario.costs
        if cost.resource_type not in scenario.planned_spending
    ]
    for resource_type, amount in scenario.planned_spending.items():
        costs.append(ResourceCost(resource_type, amount, description="planned"))
    return costs


def render_report(scenario: Scenario, args: argparse.Namespace) -> None:
    """Print every analysis for a scenario."""
    console = rich_ui.console
    logging_config = get_logging_config()

    operations = scenario.operations
    if args.expected:
        operations = expected_operations(operations)

    costs = planned_costs(scenario)
    portfolio = optimize_portfolio(scenario.resources, costs)

    console.print(create_resource_table(scenario.resources))
    console.print(create_overall_health_panel(portfolio.overall_health))

    for resource in scenario.resources:
        console.print(create_spending_table(resource, plan_spending(resource, scenario.costs)))

        planned = sum(
            cost.amount for cost in costs
            if cost.resource_type == resource.resource_type
        )
        console.print(create_budget_panel(resource, create_budget(resource, planned, args.reserve)))

        if operations:
            console.print(create_outcome_panel(resource, predict_outcome(resource, operations)))

    console.print(create_portfolio_table(portfolio))

    if logging_config:
        for resource, rec in zip(portfolio.resources, portfolio.recommendations):
            logging_config.log_decision(
                str(resource), rec.recommended_action.name, rec.reasoning
            )

    top = portfolio.highest_priority_recommendation()
    if top is not None and top.priority > 0:
        print_status_message(
            f"Most urgent: {top.recommended_action.name} for {top.resource_type.value}",
            "warning"
        )


def main() -> None:
    """
    Main entry point.

    Flow:
        1. Load environment variables
        2. Parse command-line arguments
        3. Initialize debug logging (if enabled)
        4. Load the scenario
        5. Print the report
    """
    load_dotenv()

    args = parse_arguments()

    debug = debug_enabled(args)
    logging_config = init_logging(
        debug_enabled=debug,
        log_dir=os.getenv("RESOURCE_ENGINE_LOG_DIR", "logs")
    )
    if debug:
        rich_ui.set_console(logging_config.create_console())
        print_status_message(
            f"Debug mode enabled. Logging to: {logging_config.get_log_file_path()}",
            "info"
        )

    print_title("Resource Engine", subtitle=str(args.scenario))

    try:
        try:
            scenario = ScenarioLoader().load(args.scenario)
        except FileNotFoundError as e:
            print_error("Scenario file not found", e)
            sys.exit(1)
        except (ValueError, KeyError) as e:
            print_error("Invalid scenario", e)
            sys.exit(1)

        render_report(scenario, args)
    finally:
        logging_config.close()


if __name__ == "__main__":
    main()
