from enum import Enum
from typing import Final, Optional


class Priority(Enum):
    HIGH = ("high", "HIGH", "priority.high")
    MEDIUM = ("medium", "MED", "priority.medium")
    LOW = ("low", "LOW", "priority.low")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @property
    def style(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["Priority"]:
        """Resolve a stored priority code; empty input means unset.

        Raises ValueError for anything that is neither empty nor a known code.
        """
        token = (value or "").strip().lower()
        if not token:
            return None
        for priority in cls:
            if priority.code == token:
                return priority
        raise ValueError(f"Invalid priority: {value!r}")


DEFAULT_PRIORITY: Final[Priority] = Priority.MEDIUM

# Unset ranks after low.
_RANK: Final[dict] = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2, None: 3}

# Unset behaves like high, so the first step from unset lands on low.
_CYCLE: Final[dict] = {
    None: Priority.LOW,
    Priority.HIGH: Priority.LOW,
    Priority.LOW: Priority.MEDIUM,
    Priority.MEDIUM: Priority.HIGH,
}


def priority_rank(priority: Optional[Priority]) -> int:
    return _RANK[priority]


def next_priority(priority: Optional[Priority]) -> Priority:
    """Advance through low -> medium -> high -> low."""
    return _CYCLE[priority]


__all__ = ["Priority", "DEFAULT_PRIORITY", "priority_rank", "next_priority"]
