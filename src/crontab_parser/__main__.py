"""CLI entry point — ``python -m crontab_parser expand|schedule|job``."""

from __future__ import annotations

import argparse
import logging
import sys

from crontab_parser.config import get_settings
from crontab_parser.core.errors import CronParseError
from crontab_parser.core.fields import FieldKind, expand_field
from crontab_parser.core.job import parse_job
from crontab_parser.core.reporter import render_field, render_job, render_schedule
from crontab_parser.core.schedule import parse_schedule

logger = logging.getLogger(__name__)


def _parse_env_pair(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        msg = f"expected KEY=VALUE, got '{value}'"
        raise argparse.ArgumentTypeError(msg)
    return key, val


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crontab_parser",
        description="Expand crontab fields and parse crontab job lines.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    expand = sub.add_parser("expand", help="Expand a single schedule field.")
    expand.add_argument("kind", choices=[k.value for k in FieldKind])
    expand.add_argument("field", help='Field text, e.g. "*/15" or "mon-fri".')

    schedule = sub.add_parser("schedule", help="Parse a schedule expression.")
    schedule.add_argument("expression", help='e.g. "*/5 * * * *" or "@daily".')

    job = sub.add_parser("job", help="Parse a crontab job line.")
    job.add_argument("line", help="The job line, quoted.")
    user_group = job.add_mutually_exclusive_group()
    user_group.add_argument(
        "--user",
        dest="has_user",
        action="store_true",
        default=None,
        help="Line has a user column (system crontab).",
    )
    user_group.add_argument(
        "--no-user",
        dest="has_user",
        action="store_false",
        help="Line has no user column (user crontab).",
    )
    job.set_defaults(has_user=None)
    job.add_argument(
        "--env",
        action="append",
        type=_parse_env_pair,
        default=[],
        metavar="KEY=VALUE",
        help="Environment entry attached to the job (repeatable).",
    )

    # Shared flags
    for p in (expand, schedule, job):
        p.add_argument(
            "--json",
            action="store_true",
            default=False,
            help="Print JSON instead of plain text.",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, run the requested parser and print the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()

    # Override output format from CLI flag
    if args.json:
        settings = settings.model_copy(update={"output_format": "json"})

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fmt = settings.output_format

    try:
        if args.command == "expand":
            print(render_field(expand_field(args.field, args.kind), fmt))
            return 0

        if args.command == "schedule":
            print(render_schedule(parse_schedule(args.expression), fmt))
            return 0

        if args.command == "job":
            has_user = settings.crontab_has_user if args.has_user is None else args.has_user
            env = {**settings.crontab_env, **dict(args.env)}
            job = parse_job(args.line, has_user=has_user, env=env)
            if job.err is not None:
                raise job.err
            print(render_job(job, fmt))
            return 0
    except CronParseError as exc:
        logger.debug("Parse failed for %r", exc.raw)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 1  # unreachable with required=True


if __name__ == "__main__":
    sys.exit(main())
