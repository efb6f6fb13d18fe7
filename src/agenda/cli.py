"""Agenda CLI - recurring event queries."""

import json
import logging
import sys
from datetime import date, datetime, timedelta

import click

from .config import Config, load_config
from .core import Agenda, Event, Frequency, InvalidEventError, Termination, TimeSlot

DATE = click.DateTime(formats=["%Y-%m-%d"])
DATETIME = click.DateTime(formats=["%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M", "%Y-%m-%d"])
FREQUENCIES = click.Choice([f.value for f in Frequency], case_sensitive=False)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


EVENT_OPTIONS = [
    click.option("--title", default="Event", show_default=True, help="Event title"),
    click.option("--start", type=DATETIME, required=True, help="Start, e.g. 2025-01-31T09:00"),
    click.option("--duration", type=click.IntRange(min=0), default=None, help="Duration in minutes"),
    click.option("--every", type=FREQUENCIES, default=None, help="Repeat unit: days, weeks, months or years"),
    click.option("--until", type=DATE, default=None, help="Last allowed date (inclusive)"),
    click.option("--count", type=int, default=None, help="Number of occurrences"),
    click.option("--except", "exceptions", type=DATE, multiple=True, help="Date to skip (repeatable)"),
]


def event_options(func):
    """Options shared by every command that builds a single event."""
    for option in reversed(EVENT_OPTIONS):
        func = option(func)
    return func


def build_event(
    config: Config,
    title: str,
    start: datetime,
    duration: int | None,
    every: str | None,
    until: datetime | None,
    count: int | None,
    exceptions: tuple[datetime, ...],
) -> Event:
    """Assemble an Event from parsed CLI options."""
    if until is not None and count is not None:
        raise click.UsageError("Use either --until or --count, not both.")

    minutes = duration if duration is not None else config.default_duration_minutes
    event = Event(title, start, timedelta(minutes=minutes))

    if every:
        event.set_repetition(Frequency.parse(every))
    for day in exceptions:
        event.add_exception(day.date())
    if until is not None:
        event.set_termination(until.date())
    elif count is not None:
        event.set_termination(count)
    return event


def parse_busy(value: str) -> tuple[datetime, int]:
    """Parse 'START/MINUTES' into a start datetime and a duration."""
    start_text, sep, minutes_text = value.rpartition("/")
    if not sep:
        raise ValueError(f"Expected START/MINUTES, got {value!r}")
    start = datetime.fromisoformat(start_text)
    minutes = int(minutes_text)
    return start, minutes


@click.group()
@click.version_option(package_name="recurring-agenda")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, debug: bool):
    """Agenda - recurring calendar events."""
    config = load_config()
    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING),
    )
    ctx.obj = config


@main.command()
@click.argument("day", type=DATE)
@event_options
@click.pass_obj
def occurs(config: Config, day: datetime, **options):
    """Check whether an event occurs on DAY (YYYY-MM-DD)."""
    try:
        event = build_event(config, **options)
    except InvalidEventError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if event.is_in_day(day.date()):
        click.echo(f"yes - {event.title} occurs on {day.date().isoformat()}")
    else:
        click.echo(f"no - {event.title} does not occur on {day.date().isoformat()}")


@main.command()
@event_options
@click.option("--from", "first", type=DATE, default=None, help="First day (defaults to start)")
@click.option("--to", "last", type=DATE, default=None, help="Last day (defaults to LOOKAHEAD_DAYS after first)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def occurrences(
    config: Config,
    first: datetime | None,
    last: datetime | None,
    as_json: bool,
    **options,
):
    """List the days an event occurs on."""
    try:
        event = build_event(config, **options)
    except InvalidEventError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    first_day: date = first.date() if first else event.start.date()
    last_day: date = last.date() if last else first_day + timedelta(days=config.lookahead_days)
    days = event.occurrences_between(first_day, last_day)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "title": event.title,
                    "frequency": event.repetition.frequency.value if event.repetition else None,
                    "number_of_occurrences": event.number_of_occurrences,
                    "termination_date": event.termination_date.isoformat() if event.termination_date else None,
                    "occurrences": [d.isoformat() for d in days],
                },
                indent=2,
            )
        )
        return

    if not days:
        click.echo(f"No occurrences between {first_day} and {last_day}.")
        return

    for day in days:
        click.echo(day.strftime("%a %Y-%m-%d"))


@main.command()
@click.option("--start", type=DATE, required=True, help="First occurrence")
@click.option("--every", type=FREQUENCIES, default=None, help="Frequency (defaults to DEFAULT_FREQUENCY)")
@click.option("--until", type=DATE, default=None, help="Last allowed date (inclusive)")
@click.option("--count", type=int, default=None, help="Number of occurrences")
@click.pass_obj
def termination(
    config: Config,
    start: datetime,
    every: str | None,
    until: datetime | None,
    count: int | None,
):
    """Convert between an occurrence count and an end date."""
    if (until is None) == (count is None):
        raise click.UsageError("Give exactly one of --until or --count.")

    frequency = Frequency.parse(every) if every else config.frequency
    if until is not None:
        bound = Termination.until(start.date(), frequency, until.date())
    else:
        bound = Termination.after(start.date(), frequency, count)

    click.echo(f"Every {frequency.value[:-1]} from {bound.start.isoformat()}")
    click.echo(f"  occurrences: {bound.number_of_occurrences}")
    click.echo(f"  last date:   {bound.termination_date_inclusive.isoformat()}")


@main.command()
@click.option("--start", type=DATETIME, required=True, help="Candidate start")
@click.option("--duration", type=click.IntRange(min=0), default=None, help="Candidate duration in minutes")
@click.option("--busy", multiple=True, help="Existing event as START/MINUTES (repeatable)")
@click.pass_obj
def free(config: Config, start: datetime, duration: int | None, busy: tuple[str, ...]):
    """Check whether a time slot is free of the given events."""
    agenda = Agenda()
    try:
        for i, value in enumerate(busy, 1):
            busy_start, minutes = parse_busy(value)
            agenda.add_event(Event(f"busy #{i}", busy_start, timedelta(minutes=minutes)))
        minutes = duration if duration is not None else config.default_duration_minutes
        candidate = Event("candidate", start, timedelta(minutes=minutes))
    except (InvalidEventError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    conflicts = agenda.conflicts_with(candidate)
    if not conflicts:
        click.echo("Free")
        return

    click.echo(f"Busy - {len(conflicts)} conflict(s):")
    for event in conflicts:
        click.echo(f"  {event.title}: {TimeSlot.of(event).format()}")


if __name__ == "__main__":
    main()
