import pytest

pytest.importorskip('rclpy')
tf2_ros = pytest.importorskip('tf2_ros')

from geometry_msgs.msg import TransformStamped  # noqa: E402

from husky_highlevel_controller.exceptions import FrameLookupError, StaleTransformError  # noqa: E402
from husky_highlevel_controller.nodes.tf2_lookup import Tf2TransformLookup  # noqa: E402


class FakeBuffer:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def lookup_transform(self, target_frame, source_frame, time, timeout=None):
        self.calls.append((target_frame, source_frame, time, timeout))
        if self.error is not None:
            raise self.error
        return self.result


def test_returns_rigid_transform():
    msg = TransformStamped()
    msg.header.frame_id = 'odom'
    msg.child_frame_id = 'base_laser'
    msg.transform.translation.y = 2.0
    msg.transform.rotation.w = 1.0
    buffer = FakeBuffer(result=msg)

    transform = Tf2TransformLookup(buffer, timeout=0.2).lookup_transform('odom', 'base_laser')

    assert transform.translation == (0.0, 2.0, 0.0)
    assert transform.frame_id == 'odom'
    target, source, _, timeout = buffer.calls[0]
    assert (target, source) == ('odom', 'base_laser')
    assert timeout.nanoseconds == 200_000_000


@pytest.mark.parametrize('error', [
    tf2_ros.LookupException('"map" passed to lookupTransform argument target_frame does not exist'),
    tf2_ros.ConnectivityException('not connected'),
])
def test_lookup_failures(error):
    lookup = Tf2TransformLookup(FakeBuffer(error=error))
    with pytest.raises(FrameLookupError):
        lookup.lookup_transform('map', 'base_laser')


def test_extrapolation_is_stale():
    lookup = Tf2TransformLookup(FakeBuffer(error=tf2_ros.ExtrapolationException('too old')))
    with pytest.raises(StaleTransformError):
        lookup.lookup_transform('odom', 'base_laser')
