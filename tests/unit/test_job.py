"""Tests for job-line tokenizing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from crontab_parser.core.errors import (
    InvalidJobLineError,
    InvalidScheduleError,
    OutOfRangeError,
)
from crontab_parser.core.job import Job, parse_job


# ── Valid lines ─────────────────────────────────────────────────────────


class TestParseJob:
    def test_with_user_preserves_command_whitespace(self) -> None:
        job = parse_job("*/5 * * * * root echo  hi", has_user=True, env={})
        assert job.ok
        assert job.err is None
        assert job.user == "root"
        assert job.command == "echo  hi"
        assert job.schedule.minute.values == tuple(range(0, 60, 5))

    def test_without_user(self) -> None:
        job = parse_job("0 2 * * * /usr/bin/backup --full  now", has_user=False)
        assert job.user == ""
        assert job.command == "/usr/bin/backup --full  now"
        assert job.schedule.hour.values == (2,)

    def test_named_schedule_without_user(self) -> None:
        job = parse_job("@daily  echo hi", has_user=False, env={})
        assert job.ok
        assert job.schedule.name == "daily"
        assert job.schedule.raw == "@daily"
        assert job.command == "echo hi"

    def test_named_schedule_with_user(self) -> None:
        job = parse_job("@reboot root /bin/start  --quiet", has_user=True)
        assert job.user == "root"
        assert job.command == "/bin/start  --quiet"
        assert job.schedule.name == "reboot"

    def test_outer_whitespace_trimmed(self) -> None:
        job = parse_job("   0 0 * * *   echo hi   ", has_user=False)
        assert job.command == "echo hi"
        assert job.raw == "   0 0 * * *   echo hi   "

    def test_tab_separated_schedule(self) -> None:
        job = parse_job("0\t0\t*\t*\t*\techo hi")
        assert job.ok
        assert job.command == "echo hi"

    def test_env_passed_through(self) -> None:
        env = {"SHELL": "/bin/bash", "MAILTO": ""}
        job = parse_job("* * * * * true", env=env)
        assert job.env == env

    def test_env_values_are_not_validated(self) -> None:
        env = {"RETRIES": 3, "PATH": None, "FLAGS": ["-v"]}
        job = parse_job("* * * * * true", env=env)
        assert job.ok
        assert job.env == env

    def test_env_passed_through_on_failure(self) -> None:
        job = parse_job("* * * *", env={"RETRIES": 3})
        assert isinstance(job.err, InvalidJobLineError)
        assert job.env == {"RETRIES": 3}

    def test_env_defaults_to_empty(self) -> None:
        assert parse_job("* * * * * true").env == {}

    def test_schedule_with_aliases(self) -> None:
        job = parse_job("30 8 * jan-mar mon,fri report.sh")
        assert job.schedule.month.values == (1, 2, 3)
        assert job.schedule.day_of_week.values == (1, 5)
        assert job.command == "report.sh"


# ── Invalid lines ───────────────────────────────────────────────────────


class TestParseJobErrors:
    @pytest.mark.parametrize("has_user", [True, False])
    def test_four_fields_is_invalid(self, has_user: bool) -> None:
        job = parse_job("* * * *", has_user=has_user, env={})
        assert isinstance(job.err, InvalidJobLineError)
        assert job.err.raw == "* * * *"

    def test_schedule_without_command_is_invalid(self) -> None:
        assert isinstance(parse_job("* * * * *").err, InvalidJobLineError)

    def test_missing_command_with_user(self) -> None:
        job = parse_job("* * * * * root", has_user=True)
        assert isinstance(job.err, InvalidJobLineError)
        assert "user and a command" in str(job.err)

    def test_schedule_error_propagates(self) -> None:
        job = parse_job("60 * * * * root echo hi", has_user=True)
        assert isinstance(job.err, OutOfRangeError)

    def test_schedule_error_takes_precedence(self) -> None:
        job = parse_job("@bogus", has_user=True)
        assert isinstance(job.err, InvalidScheduleError)

    def test_failed_job_has_no_partial_state(self) -> None:
        job = parse_job("* * * * 9 root echo", has_user=True, env={"A": "1"})
        assert not job.ok
        assert job.user == ""
        assert job.command == ""
        assert job.schedule is None
        assert job.env == {"A": "1"}

    def test_empty_line(self) -> None:
        assert isinstance(parse_job("").err, InvalidJobLineError)

    def test_job_is_frozen(self) -> None:
        job = parse_job("* * * * * true")
        assert isinstance(job, Job)
        with pytest.raises(ValidationError):
            job.command = "false"  # type: ignore[misc]
