"""entrylogger CLI - personal tagged log."""

import json
import logging
import sys
from dataclasses import asdict

import click

from .adapters.file_store import FileEntryStore
from .config import Config, load_config
from .core.codec import encode_entry
from .core.entry import TIME_BUCKETS, EntryMetadata, EntryRecord
from .core.errors import DomainError, ErrorCode, PersistenceError
from .core.validation import (
    MAX_MESSAGE_LENGTH,
    MAX_TAG_LENGTH,
    validate_date,
    validate_message,
    validate_tag,
    validate_time,
)
from .input_parsing import resolve_date, resolve_time
from .service import EntryService

# Prompt-facing messages per field and error code
FIELD_ERRORS = {
    "date": {
        ErrorCode.INVALID_FORMAT: "Expected one of the following: today, yesterday or <dd-mon-yy> format",
    },
    "time": {
        ErrorCode.INVALID_FORMAT: f"Expected one of the following: {', '.join(TIME_BUCKETS)} or now",
    },
    "tag": {
        ErrorCode.INVALID_FORMAT: "Only lowercase alphanumerical characters allowed in tag",
        ErrorCode.MAX_LENGTH_EXCEEDED: f"Maximum length allowed for tag: {MAX_TAG_LENGTH}",
    },
    "message": {
        ErrorCode.MAX_LENGTH_EXCEEDED: f"Maximum length allowed for message: {MAX_MESSAGE_LENGTH}",
    },
}


def build_service(config: Config) -> EntryService:
    """Wire the file store into an EntryService."""
    store = FileEntryStore(config.store_config())
    return EntryService(store, strict=config.strict_validation)


def check_field(name: str, validator, value: str) -> str:
    """Run a field validator, translating failures into a click error."""
    try:
        return validator(value)
    except DomainError as e:
        message = FIELD_ERRORS.get(name, {}).get(e.code, e.message)
        raise click.BadParameter(message, param_hint=name)


def entry_to_dict(entry: EntryRecord | None) -> dict | None:
    if entry is None:
        return None
    return {**asdict(entry.metadata), "message": entry.message}


@click.group()
@click.version_option()
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="Path to entrylogger.conf")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, debug: bool):
    """entrylogger - personal tagged log."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config(config_path)


@main.command()
@click.option("--date", "-d", "raw_date", default=None, help="dd-mon-yy, today or yesterday")
@click.option("--time", "-t", "raw_time", default=None, help="Time bucket or now")
@click.option("--tag", default=None, help="Lowercase alphanumeric tag")
@click.option("--message", "-m", default=None, help="Entry text")
@click.pass_obj
def post(config: Config, raw_date: str | None, raw_time: str | None,
         tag: str | None, message: str | None):
    """Record a new entry."""
    raw_date = raw_date if raw_date is not None else click.prompt("date")
    date_value = check_field("date", validate_date, resolve_date(raw_date))

    raw_time = raw_time if raw_time is not None else click.prompt("time")
    time_value = check_field("time", validate_time, resolve_time(raw_time))

    tag = tag if tag is not None else click.prompt("tag")
    tag = check_field("tag", validate_tag, tag)

    message = message if message is not None else click.prompt("message")
    message = check_field("message", validate_message, message)

    record = EntryRecord(
        metadata=EntryMetadata(date=date_value, time=time_value, tag=tag),
        message=message,
    )
    try:
        stored = build_service(config).post_entry(record)
    except (DomainError, PersistenceError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(encode_entry(stored))


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_entries(config: Config, as_json: bool):
    """List all entries in order."""
    try:
        entries = build_service(config).get_entries()
    except PersistenceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([entry_to_dict(e) for e in entries], indent=2))
        return

    if not entries:
        click.echo("No entries yet.")
        return

    for entry in entries:
        click.echo(encode_entry(entry))


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def digest(config: Config, as_json: bool):
    """Summarize the log."""
    try:
        summary = build_service(config).get_digest()
    except PersistenceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "qty": summary.qty,
                    "tags": summary.tags,
                    "entries_today": summary.entries_today,
                    "last_entry_date": summary.last_entry_date,
                    "last_entry": entry_to_dict(summary.last_entry),
                },
                indent=2,
            )
        )
        return

    click.echo(f"Entries: {summary.qty} ({summary.entries_today} today)")
    click.echo(f"Tags: {', '.join(summary.tags) or 'none'}")
    if summary.last_entry:
        click.echo(f"Last: {encode_entry(summary.last_entry)}")
