import math

import pytest
import tf_transformations

from husky_highlevel_controller.exceptions import FrameLookupError, StaleTransformError
from husky_highlevel_controller.models import RangeScan, RigidTransform


class StaticTransformLookup:
    """In-memory frame service holding direct parent/child transforms only."""

    def __init__(self, transforms=(), stale=()):
        self.transforms = {(t.frame_id, t.child_frame_id): t for t in transforms}
        self.stale = set(stale)
        self.queries = []

    def lookup_transform(self, target_frame, source_frame, time=None):
        self.queries.append((target_frame, source_frame, time))
        if (target_frame, source_frame) in self.stale:
            raise StaleTransformError(target_frame, source_frame, 'extrapolation into the past')
        if (target_frame, source_frame) in self.transforms:
            return self.transforms[(target_frame, source_frame)]
        if (source_frame, target_frame) in self.transforms:
            return invert(self.transforms[(source_frame, target_frame)])
        raise FrameLookupError(target_frame, source_frame, 'frame does not exist')


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def debug(self, msg, **kwargs):
        self.messages.append(('debug', msg))

    def info(self, msg, **kwargs):
        self.messages.append(('info', msg))

    def warn(self, msg, **kwargs):
        self.messages.append(('warn', msg))

    def error(self, msg, **kwargs):
        self.messages.append(('error', msg))


def yaw_quaternion(yaw):
    return (0.0, 0.0, math.sin(yaw / 2.0), math.cos(yaw / 2.0))


@pytest.fixture
def ten_sample_scan():
    return RangeScan(
        ranges=[5.0, 4.0, 3.0, 2.5, 2.0, 1.5, 2.0, 2.5, 3.0, 4.0],
        angle_min=-0.5,
        angle_increment=0.1,
        range_min=0.1,
        range_max=10.0,
        frame_id='base_laser',
    )


@pytest.fixture
def odom_lookup():
    return StaticTransformLookup([
        RigidTransform(
            translation=(1.0, 2.0, 0.0),
            rotation=yaw_quaternion(math.pi / 2),
            frame_id='odom',
            child_frame_id='base_laser',
        ),
    ])


@pytest.fixture
def logger():
    return RecordingLogger()


def invert(transform):
    matrix = tf_transformations.inverse_matrix(
        tf_transformations.concatenate_matrices(
            tf_transformations.translation_matrix(transform.translation),
            tf_transformations.quaternion_matrix(transform.rotation),
        )
    )
    return RigidTransform(
        translation=tuple(float(v) for v in tf_transformations.translation_from_matrix(matrix)),
        rotation=tuple(float(v) for v in tf_transformations.quaternion_inverse(transform.rotation)),
        frame_id=transform.child_frame_id,
        child_frame_id=transform.frame_id,
    )
