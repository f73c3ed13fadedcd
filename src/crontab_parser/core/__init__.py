"""Core parsing — field expansion, schedules and job lines."""

from crontab_parser.core.errors import (
    CronParseError,
    InvalidJobLineError,
    InvalidRangeError,
    InvalidScheduleError,
    InvalidStepError,
    OutOfRangeError,
    UnknownFieldKindError,
)
from crontab_parser.core.fields import (
    FIELD_SPECS,
    ExpandedField,
    FieldKind,
    FieldSpec,
    expand_field,
    matches,
)
from crontab_parser.core.job import Job, parse_job
from crontab_parser.core.schedule import NAMED_SCHEDULES, Schedule, parse_schedule

__all__ = [
    "CronParseError",
    "ExpandedField",
    "FIELD_SPECS",
    "FieldKind",
    "FieldSpec",
    "InvalidJobLineError",
    "InvalidRangeError",
    "InvalidScheduleError",
    "InvalidStepError",
    "Job",
    "NAMED_SCHEDULES",
    "OutOfRangeError",
    "Schedule",
    "UnknownFieldKindError",
    "expand_field",
    "matches",
    "parse_job",
    "parse_schedule",
]
