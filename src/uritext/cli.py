"""Click CLI exposing the URL helpers: add-param, remove-param, slash, combine, domain, parse-int, parse-str."""

from __future__ import annotations

import click
from pydantic import ValidationError

from uritext import uri
from uritext.logging import setup_logging
from uritext.settings import LOG_LEVELS, Settings


def _emit(ctx: click.Context, command: str, result: object, **inputs: object) -> None:
    """Log the call, print the result, exit 1 when there is none."""
    log = ctx.obj["log"]
    log.debug(f"cli.{command}", result=result, **inputs)
    if result is None:
        raise SystemExit(1)
    click.echo(result)


@click.group()
@click.option("--log-dir", default=None, help="Write JSON logs to this directory (overrides URITEXT_LOG_DIR).")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Stderr log threshold (overrides URITEXT_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_dir: str | None, log_level: str | None) -> None:
    """uritext: manipulate query strings, paths and domain names."""
    ctx.ensure_object(dict)

    overrides = {}
    if log_dir is not None:
        overrides["log_dir"] = log_dir
    if log_level is not None:
        overrides["log_level"] = log_level
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        raise click.UsageError(f"Invalid settings: {exc}") from exc

    ctx.obj["settings"] = settings
    ctx.obj["log"] = setup_logging(settings.log_dir, settings.log_name, settings.log_level)


@cli.command("add-param")
@click.argument("name")
@click.argument("value", required=False)
@click.option("--url", default=None, help="URL to modify. Omitted or blank starts a bare query string.")
@click.pass_context
def add_param(ctx: click.Context, name: str, value: str | None, url: str | None) -> None:
    """Add or replace query parameter NAME on --url. Without VALUE the parameter is removed."""
    result = uri.add_parameter(url, name, value)
    _emit(ctx, "add_param", result, url=url, name=name, value=value)


@cli.command("remove-param")
@click.argument("url")
@click.argument("name")
@click.pass_context
def remove_param(ctx: click.Context, url: str, name: str) -> None:
    """Remove every occurrence of a query parameter."""
    result = uri.remove_parameter(url, name)
    _emit(ctx, "remove_param", result, url=url, name=name)


@cli.command()
@click.argument("value", required=False)
@click.pass_context
def slash(ctx: click.Context, value: str | None) -> None:
    """Append a trailing forward slash if missing."""
    result = uri.append_forward_slash(value)
    _emit(ctx, "slash", result, value=value)


@cli.command()
@click.argument("value1", required=False)
@click.argument("value2", required=False)
@click.pass_context
def combine(ctx: click.Context, value1: str | None, value2: str | None) -> None:
    """Join two URL parts with a single slash."""
    result = uri.combine(value1, value2)
    _emit(ctx, "combine", result, value1=value1, value2=value2)


@cli.command()
@click.argument("url")
@click.pass_context
def domain(ctx: click.Context, url: str) -> None:
    """Print the domain name (last two host labels) of a URL."""
    result = uri.get_domain_name(url)
    _emit(ctx, "domain", result, url=url)


@cli.command("parse-int")
@click.argument("value", required=False)
@click.option("--min", "min_value", required=True, type=int, help="Smallest accepted value (inclusive).")
@click.option("--max", "max_value", required=True, type=int, help="Largest accepted value (inclusive).")
@click.option("--default", "default", required=True, type=int, help="Returned when VALUE is blank, invalid or out of range.")
@click.pass_context
def parse_int(ctx: click.Context, value: str | None, min_value: int, max_value: int, default: int) -> None:
    """Parse VALUE as an integer within [--min, --max]."""
    if min_value > max_value:
        raise click.UsageError(f"--min ({min_value}) must not exceed --max ({max_value}).")
    result = uri.parse_int_parameter(value, min_value, max_value, default)
    _emit(ctx, "parse_int", result, value=value, min_value=min_value, max_value=max_value, default=default)


@cli.command("parse-str")
@click.argument("value", required=False)
@click.option("--default", "default", required=True, help="Returned when VALUE is blank.")
@click.pass_context
def parse_str(ctx: click.Context, value: str | None, default: str) -> None:
    """Print VALUE, or --default when VALUE is blank."""
    result = uri.parse_string_parameter(value, default)
    _emit(ctx, "parse_str", result, value=value, default=default)
