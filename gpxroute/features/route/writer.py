"""
Route Output Writer

Serializes route documents to JSON files named after the route:
<slug>-geojson.json, <slug>-elevation.json and <slug>-stats.json.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from gpxroute.exceptions import OutputWriteError
from gpxroute.shared.formatters import slugify_route_name
from .schemas import RouteResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrittenFiles:
    """Paths of the documents written for one route."""
    slug: str
    geojson: Path
    elevation: Path
    stats: Path

    @property
    def paths(self) -> List[Path]:
        return [self.geojson, self.elevation, self.stats]


class RouteOutputWriter:
    """Write the three route documents into a directory."""

    def __init__(self, output_dir: Union[str, Path] = ".", indent: int = 2):
        self.output_dir = Path(output_dir)
        self.indent = indent

    def serialize(self, result: RouteResult) -> Dict[str, str]:
        """Render every document to JSON text, keyed by file suffix."""
        return {
            "geojson": result.geometry.model_dump_json(indent=self.indent),
            "elevation": result.elevation_profile.model_dump_json(
                indent=self.indent, by_alias=True
            ),
            "stats": result.stats.model_dump_json(indent=self.indent, by_alias=True),
        }

    def write(self, result: RouteResult) -> WrittenFiles:
        """
        Write all documents for a route.

        Everything is serialized before the first file is opened, and the
        documents are staged as .json.tmp files so a failed write leaves
        none of them behind.

        Raises:
            OutputWriteError: If the directory or a file cannot be written
        """
        documents = self.serialize(result)
        slug = slugify_route_name(result.route_name)

        files = WrittenFiles(
            slug=slug,
            geojson=self.output_dir / f"{slug}-geojson.json",
            elevation=self.output_dir / f"{slug}-elevation.json",
            stats=self.output_dir / f"{slug}-stats.json",
        )

        staged = [
            (path.with_suffix(".json.tmp"), path, documents[suffix])
            for suffix, path in zip(documents, files.paths)
        ]
        moved: List[Path] = []

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            for tmp_path, _, text in staged:
                tmp_path.write_text(text, encoding="utf-8")
            for tmp_path, path, _ in staged:
                os.replace(tmp_path, path)
                moved.append(path)
                logger.info(f"Wrote {path}")
        except OSError as e:
            logger.error(f"Failed to write route documents: {e}")
            for leftover in [tmp for tmp, _, _ in staged] + moved:
                if leftover.is_file():
                    leftover.unlink()
            raise OutputWriteError(f"Cannot write output files: {e}") from e

        return files
