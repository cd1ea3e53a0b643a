from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.time_utils import time_to_minutes
from ..core.constants import DEFAULT_SCHEDULE, MINUTES_PER_DAY


def _target_minutes(value: Any) -> int:
    """Schedule cell -> minutes. Unreadable or out-of-range cells count as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        minutes: Optional[int] = value
    else:
        minutes = time_to_minutes(str(value) if value is not None else None)
    if minutes is None or not (0 <= minutes <= MINUTES_PER_DAY):
        return 0
    return minutes


@dataclass(frozen=True)
class WeeklySchedule:
    """Target minutes per weekday, 0=Sunday..6=Saturday."""

    targets: tuple[int, int, int, int, int, int, int]

    @classmethod
    def from_mapping(
        cls,
        values: Optional[Mapping[Any, Any]] = None,
        *,
        default: Mapping[int, Any] = DEFAULT_SCHEDULE,
    ) -> "WeeklySchedule":
        """Build from {weekday: "HH:MM" or minutes}; keys may be strings ("0".."6")."""
        by_index: dict[int, Any] = {int(k): v for k, v in default.items()}
        for key, value in (values or {}).items():
            try:
                index = int(key)
            except (TypeError, ValueError):
                continue
            if 0 <= index <= 6:
                by_index[index] = value
        return cls(targets=tuple(_target_minutes(by_index.get(i)) for i in range(7)))  # type: ignore[arg-type]

    def target_for(self, weekday: Optional[int]) -> int:
        if weekday is None:
            return 0
        return self.targets[weekday]
