#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from geometry_msgs.msg import Twist
from sensor_msgs.msg import LaserScan
from visualization_msgs.msg import Marker
from tf2_ros import Buffer, TransformListener

from ..exceptions import HighlevelControllerError, IndexOutOfRangeError, NoValidRangeError
from ..processors import ObstacleFollower, PoseTransformer
from .conversions import marker_to_msg, scan_from_msg, scan_to_msg, twist_from_command
from .tf2_lookup import Tf2TransformLookup


class HighlevelController(Node):
    """Steers towards the closest obstacle in the laser scan with a P-controller."""

    def __init__(self, **kwargs):
        super().__init__('highlevel_controller', **kwargs)

        # Parameters
        self.declare_parameter('scan_topic', 'scan')
        self.declare_parameter('queue_size', 10)
        self.declare_parameter('cmd_vel_topic', 'cmd_vel')
        self.declare_parameter('marker_topic', 'visualization_marker')
        self.declare_parameter('filtered_scan_topic', 'scan_filtered')
        self.declare_parameter('controller_gain', 1.0)
        self.declare_parameter('linear_speed', 0.5)
        self.declare_parameter('window_half_width', 5)
        self.declare_parameter('fixed_frame', 'odom')
        self.declare_parameter('transform_timeout', 0.0)  # seconds, 0 never blocks the callback

        scan_topic = self.get_parameter('scan_topic').value
        queue_size = self.get_parameter('queue_size').value
        cmd_vel_topic = self.get_parameter('cmd_vel_topic').value
        marker_topic = self.get_parameter('marker_topic').value
        filtered_scan_topic = self.get_parameter('filtered_scan_topic').value
        self.controller_gain = self.get_parameter('controller_gain').value
        self.linear_speed = self.get_parameter('linear_speed').value
        self.window_half_width = self.get_parameter('window_half_width').value
        self.fixed_frame = self.get_parameter('fixed_frame').value
        self.transform_timeout = self.get_parameter('transform_timeout').value

        if self.window_half_width < 0:
            self.get_logger().error(
                f'Invalid window_half_width {self.window_half_width}, must be non-negative'
            )
            raise ValueError(f'window_half_width must be non-negative, got {self.window_half_width}')

        # TF listener for the fixed frame marker
        self.tf_buffer = Buffer()
        self.tf_listener = TransformListener(self.tf_buffer, self)

        self.follower = ObstacleFollower(
            gain=self.controller_gain,
            linear_speed=self.linear_speed,
            window_half_width=self.window_half_width,
            transformer=PoseTransformer(
                Tf2TransformLookup(self.tf_buffer, timeout=self.transform_timeout),
                logger=self.get_logger()
            ),
            fixed_frame=self.fixed_frame,
            logger=self.get_logger()
        )

        # Publishers and subscribers
        self.cmd_vel_pub = self.create_publisher(Twist, cmd_vel_topic, queue_size)
        self.marker_pub = self.create_publisher(Marker, marker_topic, queue_size)
        self.filtered_scan_pub = self.create_publisher(LaserScan, filtered_scan_topic, queue_size)
        self.scan_sub = self.create_subscription(
            LaserScan,
            scan_topic,
            self.scan_callback,
            queue_size
        )

        self.get_logger().info(
            f'Highlevel controller started - listening on "{scan_topic}", '
            f'gain={self.controller_gain}, linear_speed={self.linear_speed}m/s'
        )

    def scan_callback(self, msg: LaserScan):
        """Run one control cycle. Nothing is published when the cycle fails."""
        try:
            result = self.follower.process_scan(scan_from_msg(msg, logger=self.get_logger()))
        except NoValidRangeError as e:
            self.get_logger().warn(
                f'No valid range in scan, skipping cycle: {e}',
                throttle_duration_sec=1.0
            )
            return
        except IndexOutOfRangeError as e:
            self.get_logger().error(f'Scan index error: {e}')
            return
        except HighlevelControllerError as e:
            self.get_logger().error(f'Control cycle failed: {e}')
            return

        stamp = msg.header.stamp
        self.filtered_scan_pub.publish(scan_to_msg(result.filtered_scan, stamp))
        self.cmd_vel_pub.publish(twist_from_command(result.command))
        self.marker_pub.publish(marker_to_msg(result.scan_marker, stamp))
        if result.fixed_frame_marker is not None:
            self.marker_pub.publish(marker_to_msg(result.fixed_frame_marker, stamp))

        self.get_logger().info(
            f'Closest obstacle: {result.closest.distance:.2f}m at '
            f'{result.bearing:.2f}rad (index {result.closest.index})',
            throttle_duration_sec=1.0
        )


def main(args=None):
    rclpy.init(args=args)
    node = HighlevelController()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()


if __name__ == '__main__':
    main()
