"""Schedule-field expansion — raw crontab field text to a sorted set of ints.

Each of the five crontab positions has a fixed numeric domain and an
optional alias table. Expansion lowercases the text, swaps aliases for
their numbers, then resolves every comma-separated item as a single value,
an inclusive range, or a stepped range.

Usage::

    from crontab_parser.core.fields import FieldKind, expand_field
    expand_field("*/15", FieldKind.MINUTE).values  # (0, 15, 30, 45)
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from crontab_parser.core.errors import (
    InvalidRangeError,
    InvalidStepError,
    OutOfRangeError,
    UnknownFieldKindError,
)

logger = logging.getLogger(__name__)

_RANGE_RE = re.compile(r"([0-9]{1,2})-([0-9]{1,2})")
_DIGITS_RE = re.compile(r"[0-9]+")
_UINT64_MAX = 2**64 - 1


class FieldKind(str, Enum):
    """The five crontab positions, in line order."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"


class FieldSpec(NamedTuple):
    """Closed domain ``[low, high]`` plus aliases indexed by numeric value."""

    low: int
    high: int
    aliases: tuple[str, ...] = ()


FIELD_SPECS: dict[FieldKind, FieldSpec] = {
    FieldKind.MINUTE: FieldSpec(0, 59),
    FieldKind.HOUR: FieldSpec(0, 23),
    FieldKind.DAY: FieldSpec(1, 31),
    FieldKind.MONTH: FieldSpec(
        1,
        12,
        ("", "jan", "feb", "mar", "apr", "may", "jun",
         "jul", "aug", "sep", "oct", "nov", "dec"),
    ),
    # 7 is Sunday too; there is no alias for it.
    FieldKind.DAY_OF_WEEK: FieldSpec(
        0, 7, ("sun", "mon", "tue", "wed", "thu", "fri", "sat")
    ),
}


class ExpandedField(BaseModel):
    """One parsed crontab field and the integers it matches."""

    model_config = ConfigDict(frozen=True)

    raw: str
    kind: FieldKind
    values: tuple[int, ...]

    def matches(self, num: int) -> bool:
        """Whether ``num`` is one of the expanded values."""
        return num in self.values


def matches(field: ExpandedField | None, num: int) -> bool:
    """Membership test that treats a missing field as matching nothing."""
    if field is None:
        return False
    return field.matches(num)


def get_field_kind(kind: FieldKind | str) -> FieldKind:
    """Coerce ``kind`` to a :class:`FieldKind`.

    Raises:
        UnknownFieldKindError: If ``kind`` is not one of the five positions.
    """
    try:
        return FieldKind(kind)
    except ValueError:
        msg = f"No field configuration for kind '{kind}'"
        raise UnknownFieldKindError(msg, raw=str(kind)) from None


def get_field_spec(kind: FieldKind | str) -> FieldSpec:
    """Look up the domain and aliases for ``kind``.

    Raises:
        UnknownFieldKindError: If ``kind`` is not one of the five positions.
    """
    field_kind = get_field_kind(kind)
    try:
        return FIELD_SPECS[field_kind]
    except KeyError:
        msg = f"No field configuration for kind '{kind}'"
        raise UnknownFieldKindError(msg, raw=str(kind)) from None


def _parse_uint(text: str) -> int | None:
    """Parse ASCII digits as an unsigned 64-bit integer, else None."""
    if not _DIGITS_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _UINT64_MAX else None


def _substitute_aliases(text: str, aliases: tuple[str, ...]) -> str:
    # Plain substring replacement, not word-boundary aware.
    for index, alias in enumerate(aliases):
        if alias:
            text = text.replace(alias, str(index))
    return text


def _resolve_range(token: str, spec: FieldSpec, raw: str) -> tuple[int, int]:
    """Resolve ``*`` or ``a-b`` to inclusive bounds within the domain."""
    if token == "*":
        return spec.low, spec.high
    match = _RANGE_RE.fullmatch(token)
    if match:
        start, end = int(match.group(1)), int(match.group(2))
        if start < end and start >= spec.low and end <= spec.high:
            return start, end
    msg = f"Invalid field '{raw}': invalid range '{token}'"
    raise InvalidRangeError(msg, raw=raw, token=token)


def _expand_item(item: str, spec: FieldSpec, raw: str) -> list[int]:
    if "/" in item:
        range_part, step_part = item.split("/", 1)
        start, end = _resolve_range(range_part, spec, raw)
        step = _parse_uint(step_part)
        if not step:
            msg = f"Invalid field '{raw}': invalid step '{step_part}'"
            raise InvalidStepError(msg, raw=raw, token=step_part)
        # Counted from the range start, not the domain start.
        return [
            value
            for counter, value in enumerate(range(start, end + 1))
            if counter % step == 0
        ]

    value = _parse_uint(item)
    if value is not None:
        if not spec.low <= value <= spec.high:
            msg = (
                f"Invalid field '{raw}': {value} is outside "
                f"{spec.low}-{spec.high}"
            )
            raise OutOfRangeError(msg, raw=raw, token=item)
        return [value]

    start, end = _resolve_range(item, spec, raw)
    return list(range(start, end + 1))


def expand_field(raw: str, kind: FieldKind | str) -> ExpandedField:
    """Expand one crontab field into the sorted set of values it matches.

    Args:
        raw: Field text, e.g. ``"*/5"``, ``"1-10/3"`` or ``"mon,wed,fri"``.
        kind: Which of the five positions the field occupies.

    Returns:
        The immutable expanded field.

    Raises:
        InvalidStepError: Step after ``/`` is zero or not a number.
        InvalidRangeError: Range is malformed, inverted or out of domain.
        OutOfRangeError: Single value is outside the domain.
        UnknownFieldKindError: ``kind`` is not a known position.
    """
    kind = get_field_kind(kind)
    spec = get_field_spec(kind)
    text = _substitute_aliases(raw.lower(), spec.aliases)

    expanded: list[int] = []
    for item in text.split(","):
        expanded.extend(_expand_item(item, spec, raw))

    if kind is FieldKind.DAY_OF_WEEK and 7 in expanded:
        expanded.append(0)

    values = tuple(sorted(set(expanded)))
    logger.debug("Expanded %s field '%s' to %d values", kind.value, raw, len(values))
    return ExpandedField(raw=raw, kind=kind, values=values)
