from rclpy.duration import Duration
from rclpy.time import Time
from tf2_ros import ExtrapolationException, TransformException

from ..exceptions import FrameLookupError, StaleTransformError
from .conversions import transform_from_msg


class Tf2TransformLookup:
    """TransformLookup backed by a tf2_ros.Buffer filled by a TransformListener."""

    def __init__(self, buffer, timeout=0.0):
        """
        Args:
            buffer: tf2_ros.Buffer to query
            timeout: Seconds to wait for the transform to become available, 0 does not wait
        """
        self.buffer = buffer
        self.timeout = Duration(seconds=timeout)

    def lookup_transform(self, target_frame, source_frame, time=None):
        if time is None:
            time = Time()  # latest available

        try:
            msg = self.buffer.lookup_transform(
                target_frame,
                source_frame,
                time,
                timeout=self.timeout
            )
        except ExtrapolationException as e:
            raise StaleTransformError(target_frame, source_frame, str(e)) from e
        except TransformException as e:
            # LookupException, ConnectivityException and InvalidArgumentException
            raise FrameLookupError(target_frame, source_frame, str(e)) from e

        return transform_from_msg(msg)
