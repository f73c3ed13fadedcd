"""Five-field and ``@name`` schedule parsing."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from crontab_parser.core.errors import InvalidScheduleError
from crontab_parser.core.fields import (
    ExpandedField,
    FieldKind,
    expand_field,
    get_field_kind,
)

logger = logging.getLogger(__name__)

# Five-field equivalents; None means the name has no time fields.
NAMED_SCHEDULES: dict[str, str | None] = {
    "yearly": "0 0 1 1 *",
    "annually": "0 0 1 1 *",
    "monthly": "0 0 1 * *",
    "weekly": "0 0 * * 0",
    "daily": "0 0 * * *",
    "midnight": "0 0 * * *",
    "hourly": "0 * * * *",
    "reboot": None,
}

_FIELD_ORDER: tuple[FieldKind, ...] = (
    FieldKind.MINUTE,
    FieldKind.HOUR,
    FieldKind.DAY,
    FieldKind.MONTH,
    FieldKind.DAY_OF_WEEK,
)


class Schedule(BaseModel):
    """Parsed schedule: five expanded fields and/or an ``@`` name."""

    model_config = ConfigDict(frozen=True)

    raw: str
    name: str = ""
    minute: ExpandedField | None = None
    hour: ExpandedField | None = None
    day: ExpandedField | None = None
    month: ExpandedField | None = None
    day_of_week: ExpandedField | None = None

    @property
    def expanded_fields(self) -> tuple[ExpandedField | None, ...]:
        """Fields in crontab order; all None for ``@reboot``."""
        return tuple(self.field(kind) for kind in _FIELD_ORDER)

    def field(self, kind: FieldKind | str) -> ExpandedField | None:
        """Return the expanded field for ``kind``.

        Raises:
            UnknownFieldKindError: If ``kind`` is not one of the five positions.
        """
        return getattr(self, get_field_kind(kind).value)

    def matches(self, kind: FieldKind | str, num: int) -> bool:
        """Whether ``num`` is matched by the ``kind`` field."""
        field = self.field(kind)
        return field is not None and field.matches(num)


def _parse_fields(text: str) -> dict[str, ExpandedField]:
    parts = text.split()
    if len(parts) != 5:
        msg = f"Schedule must have 5 fields, got {len(parts)}: '{text}'"
        raise InvalidScheduleError(msg, raw=text)
    return {
        kind.value: expand_field(part, kind)
        for kind, part in zip(_FIELD_ORDER, parts)
    }


def parse_schedule(text: str) -> Schedule:
    """Parse a schedule expression.

    Accepts either ``"minute hour day month day_of_week"`` or one of the
    ``@`` names in :data:`NAMED_SCHEDULES` (case-insensitive).

    Raises:
        InvalidScheduleError: Wrong field count or unknown ``@`` name.
        CronParseError: Any field-level expansion error.
    """
    text = text.strip()
    if text.startswith("@"):
        name = text[1:].lower()
        if name not in NAMED_SCHEDULES:
            msg = f"Unknown named schedule: '{text}'"
            raise InvalidScheduleError(msg, raw=text, token=text)
        equivalent = NAMED_SCHEDULES[name]
        fields = _parse_fields(equivalent) if equivalent else {}
        logger.debug("Resolved named schedule '%s' to '%s'", text, equivalent)
        return Schedule(raw=text, name=name, **fields)

    schedule = Schedule(raw=text, **_parse_fields(text))
    logger.debug("Parsed schedule '%s'", text)
    return schedule
