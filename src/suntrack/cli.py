"""Command-line interface for Suntrack."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
import yaml

from suntrack import __version__
from suntrack.config import Config, LocationConfig, load_config, save_config
from suntrack.export import ExportError, path_to_dict, write_path_json
from suntrack.logger import setup_logger
from suntrack.service import SunPathService, SunTrackError


def _load_config_or_exit(ctx: click.Context) -> Config:
    """Load configuration, reporting invalid files instead of raising."""
    try:
        return load_config(ctx.obj.get("config_path"))
    except (ValueError, TypeError) as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        ctx.exit(1)


def _load_service(ctx: click.Context) -> SunPathService:
    """Load configuration, apply location overrides and build the service."""
    config = _load_config_or_exit(ctx)
    overrides = ctx.obj.get("location_overrides", {})
    if overrides:
        location = config.location
        try:
            config.location = LocationConfig(
                latitude=overrides.get("latitude", location.latitude),
                longitude=overrides.get("longitude", location.longitude),
                timezone=overrides.get("timezone", location.timezone),
            )
        except ValueError as e:
            raise click.BadParameter(str(e))

    setup_logger(config.logging)

    try:
        return SunPathService(config)
    except SunTrackError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="suntrack")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--lat", "latitude", type=float, help="Observer latitude in degrees")
@click.option("--lon", "longitude", type=float, help="Observer longitude in degrees")
@click.option("--tz", "timezone", type=str, help="Observer IANA timezone")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    latitude: Optional[float],
    longitude: Optional[float],
    timezone: Optional[str],
) -> None:
    """Suntrack sun path calculator.

    Computes the sun's altitude and azimuth over a day for an observer.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["location_overrides"] = {
        key: value
        for key, value in (
            ("latitude", latitude),
            ("longitude", longitude),
            ("timezone", timezone),
        )
        if value is not None
    }


@cli.command()
@click.option("--at", "at", type=str, help="ISO 8601 instant (default: now)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def position(ctx: click.Context, at: Optional[str], as_json: bool) -> None:
    """Show the sun's position at an instant."""
    instant = None
    if at is not None:
        try:
            instant = datetime.fromisoformat(at)
        except ValueError:
            raise click.BadParameter(f"not an ISO 8601 date/time: {at}", param_hint="--at")

    service = _load_service(ctx)
    sample = service.position_at(instant)
    angle_unit = service.config.output.angle_unit

    if as_json:
        click.echo(json.dumps(sample.to_dict(angle_unit), indent=service.config.output.indent))
        return

    loc = service.location
    click.echo(f"Location: {loc.latitude:.4f}, {loc.longitude:.4f} ({service.config.location.timezone})")
    click.echo(f"Time: {sample.instant.isoformat()}")
    click.echo(f"  Altitude: {sample.altitude_deg:.2f}°")
    click.echo(f"  Azimuth: {sample.azimuth_deg:.2f}° (0°=N, 90°=E, 180°=S)")
    if sample.altitude_rad <= 0:
        click.echo("  Sun is below the horizon")


@cli.command()
@click.option(
    "--date",
    "-d",
    "day",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Local date (YYYY-MM-DD, default: today)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Write the path to a JSON file",
)
@click.pass_context
def path(
    ctx: click.Context,
    day: Optional[datetime],
    as_json: bool,
    output: Optional[Path],
) -> None:
    """Sample the sun's path over a day."""
    service = _load_service(ctx)
    request = service.request_for(day.date() if day else None)
    samples = service.path_for(request=request)
    out = service.config.output

    if output is not None:
        try:
            write_path_json(samples, output, request, out.angle_unit, out.indent)
        except ExportError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        click.echo(f"Sun path written to: {output}")
        return

    if as_json:
        click.echo(json.dumps(path_to_dict(samples, request, out.angle_unit), indent=out.indent))
        return

    if not samples:
        click.echo(f"The sun stays below the horizon on {request.start.date()}.")
        return

    summary = service.summarize(samples)
    click.echo(f"Sun path for {request.start.date()} ({summary['count']} samples):\n")
    for sample in samples:
        click.echo(
            f"  {sample.instant.strftime('%H:%M')}  "
            f"alt {sample.altitude_deg:6.2f}°  az {sample.azimuth_deg:6.2f}°"
        )
    peak = summary["peak"]
    click.echo(
        f"\nPeak: {peak['altitude_deg']:.2f}° at {peak['instant']} "
        f"(azimuth {peak['azimuth_deg']:.2f}°)"
    )


@cli.command("config")
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--create", is_flag=True, help="Create default configuration file")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path("config/config.yaml"),
    help="Output path for configuration file",
)
@click.pass_context
def config_cmd(
    ctx: click.Context, show: bool, create: bool, output: Path
) -> None:
    """Manage configuration."""
    if create and not show:
        if output.exists():
            if not click.confirm(f"{output} already exists. Overwrite?"):
                return

        save_config(Config(), output)
        click.echo(f"Configuration file created: {output}")
        return

    # Default: show current configuration
    config = _load_config_or_exit(ctx)
    click.echo(yaml.dump(config.to_dict(), default_flow_style=False, allow_unicode=True))


if __name__ == "__main__":
    cli()
