from .marker_builder import build_marker
from .obstacle_follower import CycleResult, ObstacleFollower
from .pose_transformer import PoseTransformer, TransformLookup
from .scan_processor import bearing_of, find_closest, point_at, valid_mask, window_around
from .steering import steer

__all__ = [
    'CycleResult',
    'ObstacleFollower',
    'PoseTransformer',
    'TransformLookup',
    'bearing_of',
    'build_marker',
    'find_closest',
    'point_at',
    'steer',
    'valid_mask',
    'window_around',
]
