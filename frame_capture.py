"""Output locations for captured frames.

Frames land in ``<project>/out/<UTC timestamp>/<index>.png``. The project is
the checkout holding pyproject.toml, or the working directory for an installed
copy. The timestamp has one-second resolution, so two runs started in the
same second write into the same directory.
"""
from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

MAX_CAPTURED_FRAMES = 1000
FRAME_EXTENSION = "png"
# no colons, Windows rejects them in paths
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def project_path(start: Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding pyproject.toml.

    Falls back to the current working directory. Raises RuntimeError when that
    directory is not writable.
    """
    here = (start or Path(__file__)).resolve()
    if here.is_file():
        here = here.parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate

    cwd = Path.cwd()
    if not os.access(cwd, os.W_OK):
        raise RuntimeError(f"no pyproject.toml above {here} and {cwd} is not writable")
    return cwd


def create_output_path(project: Path, now: datetime | None = None) -> Path:
    now = now or datetime.now(timezone.utc)
    return project / "out" / now.strftime(TIMESTAMP_FORMAT)


def should_capture(frame_index: int) -> bool:
    return frame_index < MAX_CAPTURED_FRAMES


def frame_path(out_path: Path, frame_index: int) -> Path:
    return out_path / f"{frame_index:03}.{FRAME_EXTENSION}"


__all__ = [
    "MAX_CAPTURED_FRAMES",
    "create_output_path",
    "frame_path",
    "project_path",
    "should_capture",
]
