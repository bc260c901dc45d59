"""Sun path export module for Suntrack.

Writes sampled paths as JSON documents for rendering front ends.
"""

import json
from pathlib import Path
from typing import Optional, Sequence

from suntrack import __version__
from suntrack.logger import get_logger
from suntrack.models import SamplingRequest, SunSample

logger = get_logger(__name__)


class ExportError(Exception):
    """Exception raised for export-related errors."""

    pass


def path_to_dict(
    samples: Sequence[SunSample],
    request: Optional[SamplingRequest] = None,
    angle_unit: str = "degrees",
) -> dict:
    """Convert a sampled path to a dictionary for JSON export.

    Args:
        samples: Samples in time order.
        request: The request that produced them, recorded when given.
        angle_unit: "degrees" or "radians".

    Returns:
        Dictionary with request, sample and software sections.
    """
    data = {
        "angle_unit": angle_unit,
        "sample_count": len(samples),
        "samples": [s.to_dict(angle_unit) for s in samples],
        "software": {
            "name": "suntrack",
            "version": __version__,
        },
    }
    if request is not None:
        data["request"] = {
            "start": request.start.isoformat(),
            "duration_minutes": request.duration_minutes,
            "step_minutes": request.step_minutes,
            "location": {
                "latitude": request.location.latitude,
                "longitude": request.location.longitude,
            },
        }
    return data


def write_path_json(
    samples: Sequence[SunSample],
    output_path: Path,
    request: Optional[SamplingRequest] = None,
    angle_unit: str = "degrees",
    indent: int = 2,
) -> Path:
    """Write a sampled path to a JSON file.

    Args:
        samples: Samples in time order.
        output_path: Destination file. Parent directories are created.
        request: The request that produced the samples.
        angle_unit: "degrees" or "radians".
        indent: JSON indentation.

    Returns:
        Path written.

    Raises:
        ExportError: If the file cannot be written.
    """
    data = path_to_dict(samples, request, angle_unit)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent)
    except PermissionError:
        raise ExportError(f"Permission denied writing sun path: {output_path}")
    except OSError as e:
        raise ExportError(f"Error writing sun path: {e}")

    logger.info(f"Sun path with {len(samples)} samples written to {output_path}")
    return output_path
