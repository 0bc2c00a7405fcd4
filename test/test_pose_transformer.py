import math

import pytest

from conftest import StaticTransformLookup, yaw_quaternion
from husky_highlevel_controller.exceptions import (
    FrameLookupError,
    StaleTransformError,
    TransformError,
)
from husky_highlevel_controller.models import Pose, RigidTransform
from husky_highlevel_controller.processors import PoseTransformer


def test_transform_into_parent_frame(odom_lookup):
    transformer = PoseTransformer(odom_lookup)
    pose = transformer.transform(Pose(position=(1.0, 0.0, 0.0), frame_id='base_laser'),
                                 'base_laser', 'odom')
    assert pose.frame_id == 'odom'
    assert pose.position == pytest.approx((1.0, 3.0, 0.0))
    assert pose.orientation == pytest.approx(yaw_quaternion(math.pi / 2))


def test_queries_latest_transform(odom_lookup):
    PoseTransformer(odom_lookup).transform(Pose(), 'base_laser', 'odom')
    assert odom_lookup.queries == [('odom', 'base_laser', None)]


def test_round_trip_reproduces_pose():
    lookup = StaticTransformLookup([
        RigidTransform(
            translation=(0.3, -1.2, 0.5),
            rotation=(0.5, 0.5, 0.5, 0.5),
            frame_id='a',
            child_frame_id='b',
        ),
    ])
    transformer = PoseTransformer(lookup)
    original = Pose(position=(2.0, -0.5, 0.25), orientation=yaw_quaternion(0.7), frame_id='a')

    there = transformer.transform(original, 'a', 'b')
    back = transformer.transform(there, 'b', 'a')

    assert back.frame_id == 'a'
    assert back.position == pytest.approx(original.position)
    # q and -q are the same rotation
    sign = 1.0 if back.orientation[3] * original.orientation[3] >= 0 else -1.0
    assert [sign * v for v in back.orientation] == pytest.approx(list(original.orientation))


def test_same_frame_does_not_query(odom_lookup):
    pose = Pose(position=(1.0, 2.0, 3.0), frame_id='odom')
    result = PoseTransformer(odom_lookup).transform(pose, 'odom', 'odom')
    assert result == pose
    assert odom_lookup.queries == []


def test_unknown_frame(odom_lookup, logger):
    transformer = PoseTransformer(odom_lookup, logger=logger)
    with pytest.raises(FrameLookupError):
        transformer.transform(Pose(), 'base_laser', 'map')
    assert logger.messages[0][0] == 'debug'


def test_stale_transform():
    lookup = StaticTransformLookup(stale=[('odom', 'base_laser')])
    with pytest.raises(StaleTransformError) as excinfo:
        PoseTransformer(lookup).transform(Pose(), 'base_laser', 'odom')
    assert isinstance(excinfo.value, TransformError)
    assert excinfo.value.target_frame == 'odom'
    assert excinfo.value.source_frame == 'base_laser'


def test_degenerate_transform_is_a_lookup_error(logger):
    lookup = StaticTransformLookup([
        RigidTransform(rotation=(0.0, 0.0, 0.0, 0.0), frame_id='odom', child_frame_id='base_laser'),
    ])
    with pytest.raises(FrameLookupError):
        PoseTransformer(lookup, logger=logger).transform(Pose(), 'base_laser', 'odom')
    assert logger.messages[0][0] == 'debug'
