"""Run-length compression of a 1440-minute intensity curve into drawable segments."""

from __future__ import annotations

from collections.abc import Sequence

from care_rhythm_server.core.clock import MINUTES_PER_DAY
from care_rhythm_server.models.heatmap import RunSegment

DEFAULT_TOLERANCE = 0.02


def find_intensity_runs(
    intensities: Sequence[float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[RunSegment]:
    """Group consecutive minutes of similar intensity into segments.

    A run keeps the intensity of its first minute and is closed as soon as a
    minute differs from it by more than ``tolerance``. Zero-intensity runs are
    dropped, so gaps mean "nothing to draw". The final run always ends at
    minute 1440.

    An activity spanning midnight comes out as two segments, one ending at
    1440 and one starting at 0.

    Args:
        intensities: Per-minute intensities in [0, 1]
        tolerance: Largest difference still merged into the current run

    Returns:
        Ordered, non-overlapping segments with intensity > 0
    """
    runs: list[RunSegment] = []
    if not intensities:
        return runs

    run_start = 0
    run_intensity = intensities[0]

    for minute in range(1, len(intensities)):
        current = intensities[minute]
        if abs(current - run_intensity) > tolerance:
            if run_intensity > 0:
                runs.append(RunSegment(run_start, minute, run_intensity))
            run_start = minute
            run_intensity = current

    if run_intensity > 0:
        runs.append(RunSegment(run_start, MINUTES_PER_DAY, run_intensity))

    return runs
