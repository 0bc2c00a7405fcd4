from dataclasses import dataclass
from typing import Tuple

import numpy as np
import tf_transformations

IDENTITY_QUATERNION = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class VelocityCommand:
    linear: float = 0.0  # m/s, forward
    angular: float = 0.0  # rad/s, about z


@dataclass(frozen=True)
class Pose:
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: Tuple[float, float, float, float] = IDENTITY_QUATERNION  # x, y, z, w
    frame_id: str = ''


def unit_quaternion(q) -> np.ndarray:
    """Normalized copy of a (x, y, z, w) quaternion."""
    q = np.asarray(q, dtype=float)
    norm = np.linalg.norm(q)
    if not np.isfinite(norm) or norm < 1e-9:
        raise ValueError(f'Degenerate quaternion {tuple(q)}')
    return q / norm


@dataclass(frozen=True)
class RigidTransform:
    """Transform taking coordinates in ``child_frame_id`` into ``frame_id``.

    Same convention as geometry_msgs/TransformStamped as returned by
    ``tf2_ros.Buffer.lookup_transform(frame_id, child_frame_id, time)``.
    """
    translation: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Tuple[float, float, float, float] = IDENTITY_QUATERNION
    frame_id: str = ''
    child_frame_id: str = ''

    def apply(self, pose: Pose) -> Pose:
        """Express ``pose`` (given in child_frame_id) in frame_id.

        Raises:
            ValueError: rotation is not a usable quaternion
        """
        rotation = unit_quaternion(self.rotation)
        matrix = tf_transformations.quaternion_matrix(rotation)
        matrix[:3, 3] = self.translation

        position = matrix @ np.append(np.asarray(pose.position, dtype=float), 1.0)
        orientation = tf_transformations.quaternion_multiply(rotation, pose.orientation)
        return Pose(
            position=tuple(float(v) for v in position[:3]),
            orientation=tuple(float(v) for v in orientation),
            frame_id=self.frame_id,
        )

