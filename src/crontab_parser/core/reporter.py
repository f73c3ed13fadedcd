"""Render parse results for the CLI as plain text or JSON."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from crontab_parser.core.fields import ExpandedField
    from crontab_parser.core.job import Job
    from crontab_parser.core.schedule import Schedule


def _values_str(values: tuple[int, ...]) -> str:
    return ",".join(str(v) for v in values)


def field_to_dict(field: ExpandedField) -> dict[str, Any]:
    """Plain-data view of an expanded field."""
    return {"raw": field.raw, "kind": field.kind.value, "values": list(field.values)}


def schedule_to_dict(schedule: Schedule) -> dict[str, Any]:
    """Plain-data view of a schedule; absent fields are left out."""
    data: dict[str, Any] = {"raw": schedule.raw, "name": schedule.name}
    for field in schedule.expanded_fields:
        if field is not None:
            data[field.kind.value] = list(field.values)
    return data


def job_to_dict(job: Job) -> dict[str, Any]:
    """Plain-data view of a job, including its error message if any."""
    return {
        "raw": job.raw,
        "user": job.user,
        "command": job.command,
        "env": dict(job.env),
        "schedule": schedule_to_dict(job.schedule) if job.schedule else None,
        "error": str(job.err) if job.err else None,
    }


def render_field(field: ExpandedField, fmt: str = "text") -> str:
    """Render an expanded field."""
    if fmt == "json":
        return json.dumps(field_to_dict(field))
    return _values_str(field.values)


def render_schedule(schedule: Schedule, fmt: str = "text") -> str:
    """Render a schedule, one ``kind: values`` line per field."""
    if fmt == "json":
        return json.dumps(schedule_to_dict(schedule))
    lines = []
    if schedule.name:
        lines.append(f"name: @{schedule.name}")
    for field in schedule.expanded_fields:
        if field is not None:
            lines.append(f"{field.kind.value}: {_values_str(field.values)}")
    return "\n".join(lines)


def render_job(job: Job, fmt: str = "text") -> str:
    """Render a successfully parsed job."""
    if fmt == "json":
        return json.dumps(job_to_dict(job), default=str)
    lines = []
    if job.user:
        lines.append(f"user: {job.user}")
    lines.append(f"command: {job.command}")
    if job.schedule is not None:
        lines.append(render_schedule(job.schedule))
    return "\n".join(lines)
