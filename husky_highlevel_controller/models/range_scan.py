from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class RangeScan:
    """Planar range reading, the plain-data counterpart of sensor_msgs/LaserScan.

    Sample ``i`` lies at bearing ``angle_min + i * angle_increment`` in
    ``frame_id``. Samples that are non-finite or outside
    ``[range_min, range_max]`` are invalid.
    """
    ranges: Tuple[float, ...]
    angle_min: float
    angle_increment: float
    range_min: float
    range_max: float
    frame_id: str
    intensities: Tuple[float, ...] = ()
    time_increment: float = 0.0
    scan_time: float = 0.0

    def __post_init__(self):
        # Accept any sequence (list, numpy array) but store tuples
        object.__setattr__(self, 'ranges', tuple(float(r) for r in self.ranges))
        object.__setattr__(self, 'intensities', tuple(float(i) for i in self.intensities))
        if self.intensities and len(self.intensities) != len(self.ranges):
            raise ValueError(
                f'{len(self.intensities)} intensities for {len(self.ranges)} ranges'
            )

    def __len__(self):
        return len(self.ranges)

    @property
    def angle_max(self) -> float:
        """Bearing of the last sample."""
        return self.angle_min + (len(self.ranges) - 1) * self.angle_increment


@dataclass(frozen=True)
class ClosestPoint:
    index: int  # index into RangeScan.ranges
    distance: float  # meters
