from __future__ import annotations

import re
from datetime import UTC, datetime


INVALID_DATE = "Invalid Date"

# "2023" and "2023-05" mean the first day of that year or month.
_PARTIAL_DATE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")


def parse_date(value: str | None) -> datetime | None:
    """Parse an ISO-ish date string into a naive UTC datetime, or None when unparsable."""
    if not value or not isinstance(value, str):
        return None
    raw = value.strip()
    partial = _PARTIAL_DATE.match(raw)
    if partial:
        try:
            return datetime(int(partial.group(1)), int(partial.group(2) or 1), 1)
        except ValueError:
            return None
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def format_date(value: str | None) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    # %b follows the process locale.
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
