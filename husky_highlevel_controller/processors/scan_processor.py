import math
from typing import Optional, Tuple

import numpy as np

from ..exceptions import IndexOutOfRangeError, NoValidRangeError
from ..models import ClosestPoint, RangeScan


def valid_mask(scan: RangeScan) -> np.ndarray:
    """Boolean mask of samples that are finite and within [range_min, range_max]."""
    ranges = np.asarray(scan.ranges, dtype=float)
    return np.isfinite(ranges) & (ranges >= scan.range_min) & (ranges <= scan.range_max)


def find_closest(scan: RangeScan) -> ClosestPoint:
    """
    Find the closest valid sample of a scan.

    Args:
        scan: Range reading to search

    Returns:
        ClosestPoint: index and distance of the nearest valid sample. Ties
        resolve to the lowest index.

    Raises:
        NoValidRangeError: scan is empty or has no valid sample
    """
    if not scan.ranges:
        raise NoValidRangeError(f'Empty scan in frame "{scan.frame_id}"')

    mask = valid_mask(scan)
    if not np.any(mask):
        raise NoValidRangeError(
            f'No sample of {len(scan)} within [{scan.range_min}, {scan.range_max}] '
            f'in frame "{scan.frame_id}"'
        )

    # argmin returns the first occurrence of the minimum
    candidates = np.where(mask, np.asarray(scan.ranges, dtype=float), np.inf)
    index = int(np.argmin(candidates))
    return ClosestPoint(index=index, distance=float(candidates[index]))


def _check_index(scan: RangeScan, index: int):
    if not 0 <= index < len(scan):
        raise IndexOutOfRangeError(index, len(scan))


def window_around(scan: RangeScan, center_index: int, half_width: int) -> RangeScan:
    """
    Cut a scan down to the samples around a center index.

    Args:
        scan: Source scan
        center_index: Index of the window center, must lie inside the scan
        half_width: Number of samples kept on each side of the center

    Returns:
        RangeScan: samples [center - half_width, center + half_width] clipped
        to the source, with angle_min shifted to the first kept sample
    """
    _check_index(scan, center_index)
    if half_width < 0:
        raise ValueError(f'half_width must be non-negative, got {half_width}')

    start = max(center_index - half_width, 0)
    stop = min(center_index + half_width + 1, len(scan))

    return RangeScan(
        ranges=scan.ranges[start:stop],
        angle_min=scan.angle_min + start * scan.angle_increment,
        angle_increment=scan.angle_increment,
        range_min=scan.range_min,
        range_max=scan.range_max,
        frame_id=scan.frame_id,
        intensities=scan.intensities[start:stop],
        time_increment=scan.time_increment,
        scan_time=scan.scan_time,
    )


def bearing_of(scan: RangeScan, index: int) -> float:
    """Bearing (rad) of a sample in the scan frame, zero straight ahead."""
    _check_index(scan, index)
    return scan.angle_min + index * scan.angle_increment


def point_at(scan: RangeScan, index: int, distance: Optional[float] = None) -> Tuple[float, float]:
    """Cartesian (x, y) of a sample in the scan frame.

    ``distance`` overrides the sample's own range, e.g. with ClosestPoint.distance.
    """
    angle = bearing_of(scan, index)
    if distance is None:
        distance = scan.ranges[index]
    return distance * math.cos(angle), distance * math.sin(angle)
