"""Exception hierarchy for field, schedule and job-line parsing."""

from __future__ import annotations


class CronParseError(ValueError):
    """Base class for every parse failure.

    Attributes:
        raw: The field, schedule or job line that failed to parse.
        token: The offending sub-token, when one can be singled out.
    """

    def __init__(self, message: str, raw: str, token: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw
        self.token = token


class InvalidStepError(CronParseError):
    """Step divisor after ``/`` is non-numeric or zero."""


class InvalidRangeError(CronParseError):
    """Range has the wrong shape, inverted bounds, or out-of-domain bounds."""


class OutOfRangeError(CronParseError):
    """Plain integer outside the field's domain."""


class UnknownFieldKindError(CronParseError):
    """No field configuration for the requested kind."""


class InvalidScheduleError(CronParseError):
    """Schedule text is neither five fields nor a known ``@`` name."""


class InvalidJobLineError(CronParseError):
    """Job line does not split into schedule, (user) and command."""
