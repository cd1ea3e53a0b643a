from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_NOT_TIME_CHARS = re.compile(r"[^\d:]")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} inválido")
    return value.strip()


def parse_day_month_text(value: str) -> tuple[int, int, Optional[int]]:
    """Parse "dd/mm" or "dd/mm/aaaa" into (day, month, year-or-None)."""
    parts = require_non_empty(value, "Data").split("/")
    if len(parts) < 2:
        raise ValidationError("Formato de data inválido. Use dd/mm ou dd/mm/aaaa")

    try:
        day = int(parts[0])
        month = int(parts[1])
        year = int(parts[2]) if len(parts) > 2 and parts[2].strip() else None
    except ValueError:
        raise ValidationError("Data inválida.") from None

    if not (1 <= day <= 31) or not (1 <= month <= 12):
        raise ValidationError("Data inválida.")
    return day, month, year


def sanitize_time_input(value: Optional[str]) -> str:
    """Clean a typed punch the way the editor masks it: "0800" -> "08:00"."""
    clean = _NOT_TIME_CHARS.sub("", value or "")
    if ":" not in clean and len(clean) > 2:
        clean = f"{clean[:2]}:{clean[2:]}"
    return clean[:5]
