"""Job-line tokenizer — schedule prefix, optional user, verbatim command."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from crontab_parser.core.errors import CronParseError, InvalidJobLineError
from crontab_parser.core.schedule import Schedule, parse_schedule
from crontab_parser.utils.text_utils import fields_n

logger = logging.getLogger(__name__)

# Either a single @name or exactly five whitespace-terminated tokens.
_SCHEDULE_RE = re.compile(r"(@\w+|(?:\S+\s+){5})(.*)", re.ASCII)


class Job(BaseModel):
    """One parsed crontab entry.

    Either ``err`` is None and ``schedule``/``command`` are populated, or
    ``err`` holds the first parse error and everything else is empty.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    raw: str
    # Passed through as-is; values are never inspected.
    env: dict[Any, Any] = Field(default_factory=dict)
    user: str = ""
    command: str = ""
    schedule: Schedule | None = None
    err: CronParseError | None = None

    @property
    def ok(self) -> bool:
        """True when the line parsed cleanly."""
        return self.err is None


def _tokenize(raw: str, has_user: bool) -> dict[str, Any]:
    match = _SCHEDULE_RE.fullmatch(raw.strip())
    if not match:
        raise InvalidJobLineError(f"Invalid job line: '{raw}'", raw=raw)

    schedule = parse_schedule(match.group(1).strip())
    remainder = match.group(2)

    if has_user:
        parts = fields_n(remainder, 2)
        if len(parts) != 2:
            msg = f"Job line must have a user and a command: '{raw}'"
            raise InvalidJobLineError(msg, raw=raw)
        user, command = parts
        return {"schedule": schedule, "user": user, "command": command}

    # "@name" leaves the separating whitespace on the remainder.
    return {"schedule": schedule, "command": remainder.lstrip()}


def parse_job(
    raw: str,
    has_user: bool = False,
    env: Mapping[Any, Any] | None = None,
) -> Job:
    """Parse one crontab job line.

    Never raises for malformed input; the error is stored on ``Job.err``.

    Args:
        raw: The job line, e.g. ``"*/5 * * * * root echo hi"``.
        has_user: Whether a user column follows the schedule (system crontab).
        env: Environment mapping passed through untouched.

    Returns:
        A fully valid or fully failed :class:`Job`.
    """
    env = dict(env or {})
    try:
        parsed = _tokenize(raw, has_user)
    except CronParseError as exc:
        logger.debug("Failed to parse job '%s': %s", raw, exc)
        return Job(raw=raw, env=env, err=exc)
    return Job(raw=raw, env=env, **parsed)
