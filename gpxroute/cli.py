"""
Command-line interface.

Usage:
    gpxroute path/to/track.gpx
    gpxroute path/to/track.gpx --output-dir ./routes --pace 5.5
    python -m gpxroute path/to/track.gpx
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from gpxroute.config import settings
from gpxroute.exceptions import GPXRouteError, MissingArgumentError
from gpxroute.features.gpx import GPXParserService
from gpxroute.features.route import (
    RouteOutputWriter,
    RouteResult,
    WrittenFiles,
    format_summary,
    process_track,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def convert(
    gpx_file: Optional[Path],
    output_dir: Path,
    pace_min_per_km: float,
    indent: int = 2,
) -> Tuple[RouteResult, WrittenFiles]:
    """
    Run the whole conversion: parse, process, then write.

    Files are written only after processing succeeded.

    Raises:
        MissingArgumentError: If no input file was given
        GPXRouteError: For any read, parse, validation or write failure
    """
    if gpx_file is None:
        raise MissingArgumentError("Missing argument 'GPX_FILE'")

    track = GPXParserService.parse_file(gpx_file)
    result = process_track(track, pace_min_per_km=pace_min_per_km)
    files = RouteOutputWriter(output_dir, indent=indent).write(result)

    logger.info(f"Converted {gpx_file} into '{files.slug}' documents")
    return result, files


@click.command()
@click.argument(
    "gpx_file",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--output-dir", "-o",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the JSON files (default: current directory)",
)
@click.option(
    "--pace",
    default=None,
    type=click.FloatRange(min=0, min_open=True),
    help="Pace in min/km for the estimated time (default: 6)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def main(ctx, gpx_file, output_dir, pace, log_level):
    """
    Convert a GPX track into route documents.

    Writes <slug>-geojson.json, <slug>-elevation.json and <slug>-stats.json,
    where <slug> is derived from the route name, then prints a summary.
    """
    setup_logging(log_level or settings.log_level)

    try:
        result, files = convert(
            gpx_file,
            output_dir=output_dir or settings.output_dir,
            pace_min_per_km=pace or settings.pace_min_per_km,
            indent=settings.json_indent,
        )
    except MissingArgumentError:
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)
    except GPXRouteError as e:
        click.echo(f"Error processing GPX file: {e}", err=True)
        ctx.exit(1)

    click.echo(format_summary(result.stats, files))
