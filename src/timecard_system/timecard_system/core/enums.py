from __future__ import annotations

from enum import Enum


class SundayMode(str, Enum):
    """Clerk override for the premium (100%) rule on a day."""

    AUTO = "auto"
    FORCE_EXTRA = "extra"
    FORCE_OFF = "off"

    def cycle(self) -> "SundayMode":
        """auto -> extra -> off -> auto"""
        return {
            SundayMode.AUTO: SundayMode.FORCE_EXTRA,
            SundayMode.FORCE_EXTRA: SundayMode.FORCE_OFF,
            SundayMode.FORCE_OFF: SundayMode.AUTO,
        }[self]


class DsrOverride(str, Enum):
    """Clerk override for the weekly paid rest (DSR) decision on a day.

    FORCED: the day is a rest day and never a fault.
    DISABLED: the automatic compensatory-rest conversion is refused.
    """

    NONE = "none"
    FORCED = "forced"
    DISABLED = "disabled"

    def cycle(self, *, is_compensatory_rest: bool) -> "DsrOverride":
        if self is DsrOverride.FORCED:
            return DsrOverride.NONE
        if self is DsrOverride.DISABLED:
            return DsrOverride.FORCED
        if is_compensatory_rest:
            return DsrOverride.DISABLED
        return DsrOverride.FORCED


class LaborWarning(str, Enum):
    """Advisory flags for human review. Never change totals."""

    ODD_PUNCH_COUNT = "ODD_PUNCH_COUNT"
    SHIFT_OVER_12H = "SHIFT_OVER_12H"
    LONG_BREAK = "LONG_BREAK"
    NO_LUNCH_BREAK = "NO_LUNCH_BREAK"

    @property
    def message(self) -> str:
        return {
            LaborWarning.ODD_PUNCH_COUNT: "Número ímpar de batidas",
            LaborWarning.SHIFT_OVER_12H: "Jornada acima de 12h",
            LaborWarning.LONG_BREAK: "Intervalo acima de 2h30",
            LaborWarning.NO_LUNCH_BREAK: "Sem intervalo de almoço adequado",
        }[self]
