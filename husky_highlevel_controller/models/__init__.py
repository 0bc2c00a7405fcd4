from .geometry import Pose, RigidTransform, VelocityCommand
from .marker import Color, Marker
from .range_scan import ClosestPoint, RangeScan

__all__ = [
    'ClosestPoint',
    'Color',
    'Marker',
    'Pose',
    'RangeScan',
    'RigidTransform',
    'VelocityCommand',
]
