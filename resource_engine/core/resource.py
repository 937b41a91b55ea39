# ABOUTME: Bounded integer resource counter (life, creativity, energy, mana)
# ABOUTME: Holds current/max values, derived percentage, and owner-side mutators

from enum import Enum
from typing import Optional


class ResourceType(Enum):
    """
    Kinds of resources a combatant can hold.

    LIFE is non-depletable through cost payment: a cost may never bring it
    to zero. Death is only reached through direct damage.
    """
    LIFE = "life"
    CREATIVITY = "creativity"
    ENERGY = "energy"
    MANA = "mana"


# Resource types whose costs must leave at least one point behind
NON_DEPLETABLE_TYPES = frozenset({ResourceType.LIFE})


class Resource:
    """
    A bounded integer counter with a known maximum.

    The resource type is fixed at construction. Current value is always kept
    within [0, max_value]; a max_value of 0 is a degenerate resource that is
    always classified as dead.

    Examples:
    - Life: Resource(ResourceType.LIFE, 100)
    - Creativity: Resource(ResourceType.CREATIVITY, 3, 10)
    """

    def __init__(self, resource_type: ResourceType, start_value: int,
                 max_value: Optional[int] = None):
        """
        Initialize a resource.

        Args:
            resource_type: What this resource represents
            start_value: Initial value
            max_value: Maximum value. Defaults to start_value when omitted
                       or not positive.
        """
        self._resource_type = resource_type

        if max_value is None or max_value <= 0:
            max_value = start_value
        self._max_value = max(0, max_value)

        self._current_value = self._clamp(start_value)

    @property
    def resource_type(self) -> ResourceType:
        return self._resource_type

    @property
    def current_value(self) -> int:
        return self._current_value

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def percentage(self) -> float:
        """Fraction of maximum currently held (0.0 when max_value is 0)"""
        if self._max_value <= 0:
            return 0.0
        return self._current_value / self._max_value

    def _clamp(self, value: int) -> int:
        return max(0, min(value, self._max_value))

    def set_current(self, value: int) -> None:
        """Set the current value, clamped into [0, max_value]."""
        self._current_value = self._clamp(value)

    def modify_by(self, delta: int) -> int:
        """
        Change the current value by a signed delta.

        Args:
            delta: Positive to gain, negative to lose

        Returns:
            The change actually applied after clamping
        """
        before = self._current_value
        self.set_current(before + delta)
        return self._current_value - before

    def reset(self) -> None:
        """Refill to the maximum value."""
        self._current_value = self._max_value

    def set_max(self, new_max: int) -> None:
        """
        Change the maximum value, lowering the current value if needed.

        Args:
            new_max: New maximum (negative values are treated as 0)
        """
        self._max_value = max(0, new_max)
        self._current_value = self._clamp(self._current_value)

    def __str__(self) -> str:
        return f"{self._resource_type.value}: {self._current_value}/{self._max_value}"

    def __repr__(self) -> str:
        return (
            f"Resource({self._resource_type}, current={self._current_value}, "
            f"max={self._max_value})"
        )
