"""crontab_parser — crontab field expansion and job-line parsing."""

from crontab_parser.core import (
    CronParseError,
    ExpandedField,
    FieldKind,
    Job,
    Schedule,
    expand_field,
    matches,
    parse_job,
    parse_schedule,
)

__version__ = "0.1.0"

__all__ = [
    "CronParseError",
    "ExpandedField",
    "FieldKind",
    "Job",
    "Schedule",
    "expand_field",
    "matches",
    "parse_job",
    "parse_schedule",
]
