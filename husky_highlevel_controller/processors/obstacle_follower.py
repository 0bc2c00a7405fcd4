from dataclasses import dataclass
from typing import Optional

from ..exceptions import TransformError
from ..models import ClosestPoint, Color, Marker, Pose, RangeScan, VelocityCommand
from .marker_builder import build_marker
from .pose_transformer import PoseTransformer
from .scan_processor import bearing_of, find_closest, point_at, window_around
from .steering import steer

SCAN_MARKER_ID = 0
FIXED_FRAME_MARKER_ID = 1


@dataclass(frozen=True)
class CycleResult:
    """Outputs of one scan cycle. fixed_frame_marker is None when the transform failed."""
    closest: ClosestPoint
    bearing: float
    command: VelocityCommand
    filtered_scan: RangeScan
    scan_marker: Marker
    fixed_frame_marker: Optional[Marker] = None


class ObstacleFollower:
    """Per-scan pipeline: closest point, P-steering towards it and its markers."""

    def __init__(self, gain=1.0, linear_speed=0.5, window_half_width=5,
                 transformer: Optional[PoseTransformer] = None,
                 fixed_frame='odom', logger=None):
        if window_half_width < 0:
            raise ValueError(f'window_half_width must be non-negative, got {window_half_width}')

        self.gain = gain
        self.base_command = VelocityCommand(linear=linear_speed, angular=0.0)
        self.window_half_width = window_half_width
        self.transformer = transformer
        self.fixed_frame = fixed_frame
        self.logger = logger

    def process_scan(self, scan: RangeScan) -> CycleResult:
        """
        Run one control cycle on a scan.

        Raises:
            NoValidRangeError: nothing to steer on; no output for this cycle
        """
        closest = find_closest(scan)
        filtered = window_around(scan, closest.index, self.window_half_width)
        bearing = bearing_of(scan, closest.index)
        command = steer(self.base_command, self.gain, bearing)

        x, y = point_at(scan, closest.index, closest.distance)
        scan_marker = build_marker(x, y, scan.frame_id, SCAN_MARKER_ID, Color.RED)

        if self.logger:
            self.logger.debug(
                f'Closest point: {closest.distance:.2f}m at {bearing:.2f}rad, '
                f'angular={command.angular:.2f}rad/s'
            )

        return CycleResult(
            closest=closest,
            bearing=bearing,
            command=command,
            filtered_scan=filtered,
            scan_marker=scan_marker,
            fixed_frame_marker=self._fixed_frame_marker(x, y, scan.frame_id),
        )

    def _fixed_frame_marker(self, x, y, frame_id) -> Optional[Marker]:
        if self.transformer is None:
            return None

        try:
            pose = self.transformer.transform(
                Pose(position=(x, y, 0.0), frame_id=frame_id),
                frame_id,
                self.fixed_frame
            )
        except TransformError as e:
            if self.logger:
                self.logger.warn(f'Skipping {self.fixed_frame} marker: {e}')
            return None

        px, py, _ = pose.position
        return build_marker(px, py, self.fixed_frame, FIXED_FRAME_MARKER_ID, Color.GREEN)
