# ABOUTME: Scenario loader for reading resource snapshots from JSON files
# ABOUTME: Builds Resource, ResourceCost, and ResourceOperation objects for analysis

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple, Type, TypeVar

from resource_engine.core.resource import Resource, ResourceType
from resource_engine.systems.costs import ResourceCost, ResourceOperation, ResourcePriority


E = TypeVar("E", bound=Enum)


@dataclass
class Scenario:
    """A snapshot of resources plus the costs and operations to evaluate"""
    resources: List[Resource] = field(default_factory=list)
    costs: List[ResourceCost] = field(default_factory=list)
    operations: List[ResourceOperation] = field(default_factory=list)
    planned_spending: Dict[ResourceType, int] = field(default_factory=dict)


def parse_enum(enum_cls: Type[E], raw: Any) -> E:
    """
    Resolve an enum member from its name or value, case-insensitively.

    Raises:
        ValueError: If raw matches no member
    """
    text = str(raw).strip()
    for member in enum_cls:
        if text.upper() == member.name or text.lower() == str(member.value).lower():
            return member
    valid = ", ".join(member.name.lower() for member in enum_cls)
    raise ValueError(f"Unknown {enum_cls.__name__} '{raw}' (expected one of: {valid})")


class ScenarioLoader:
    """
    Loads resource scenarios from JSON.

    A scenario lists resources with their current and maximum values, and
    optionally candidate costs, predicted operations and planned spending
    per resource type.
    """

    def load(self, path: Path) -> Scenario:
        """
        Load a scenario file.

        Args:
            path: Path to the JSON file

        Returns:
            Parsed Scenario

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid JSON or has bad entries
            KeyError: If a required field is missing
        """
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Scenario file {path} is not valid JSON: {e}") from e

        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> Scenario:
        """
        Build a Scenario from already-decoded JSON data.

        Raises:
            ValueError: If a section or entry has the wrong shape or value
            KeyError: If a required field is missing
        """
        if not isinstance(data, dict):
            raise ValueError("Scenario must be a JSON object")

        if not data.get("resources"):
            raise ValueError("Scenario must define at least one resource")

        scenario = Scenario()

        for index, entry in _entries(data, "resources", "Resource"):
            try:
                scenario.resources.append(Resource(
                    parse_enum(ResourceType, entry["type"]),
                    int(entry["current"]),
                    int(entry["max"]) if entry.get("max") is not None else None
                ))
            except KeyError as e:
                raise KeyError(f"Resource #{index} is missing field {e}") from e
            except TypeError as e:
                raise ValueError(f"Resource #{index} has a non-numeric value: {e}") from e

        for index, entry in _entries(data, "costs", "Cost"):
            try:
                scenario.costs.append(ResourceCost(
                    resource_type=parse_enum(ResourceType, entry["type"]),
                    amount=int(entry["amount"]),
                    priority=parse_enum(ResourcePriority, entry.get("priority", "medium")),
                    description=entry.get("description", "")
                ))
            except KeyError as e:
                raise KeyError(f"Cost #{index} is missing field {e}") from e
            except TypeError as e:
                raise ValueError(f"Cost #{index} has a non-numeric value: {e}") from e

        for index, entry in _entries(data, "operations", "Operation"):
            try:
                probability = float(entry.get("probability", 1.0))
                if not 0.0 <= probability <= 1.0:
                    raise ValueError(
                        f"Operation #{index} probability {probability} is outside [0, 1]"
                    )
                scenario.operations.append(ResourceOperation(
                    resource_type=parse_enum(ResourceType, entry["type"]),
                    amount=int(entry["amount"]),
                    probability=probability,
                    description=entry.get("description", "")
                ))
            except KeyError as e:
                raise KeyError(f"Operation #{index} is missing field {e}") from e
            except TypeError as e:
                raise ValueError(f"Operation #{index} has a non-numeric value: {e}") from e

        planned = data.get("planned_spending", {})
        if not isinstance(planned, dict):
            raise ValueError("planned_spending must be a JSON object of type -> amount")
        for type_name, amount in planned.items():
            try:
                scenario.planned_spending[parse_enum(ResourceType, type_name)] = int(amount)
            except TypeError as e:
                raise ValueError(f"Planned spending for '{type_name}' is not a number") from e

        return scenario


def _entries(data: Dict[str, Any], section: str, label: str) -> Iterator[Tuple[int, Dict[str, Any]]]:
    """Yield (index, entry) for a list section, checking every entry is an object"""
    entries = data.get(section, [])
    if not isinstance(entries, list):
        raise ValueError(f"Scenario '{section}' must be a list")
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"{label} #{index} must be a JSON object, got {type(entry).__name__}")
        yield index, entry
