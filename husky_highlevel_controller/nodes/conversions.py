"""Conversions between ROS 2 messages and the controller's plain value types."""
from geometry_msgs.msg import Point, Pose as PoseMsg, Quaternion, Twist, Vector3
from sensor_msgs.msg import LaserScan
from std_msgs.msg import ColorRGBA, Header
from visualization_msgs.msg import Marker as MarkerMsg

from ..models import Marker, Pose, RangeScan, RigidTransform, VelocityCommand

MARKER_TYPES = {
    'sphere': MarkerMsg.SPHERE,
    'cube': MarkerMsg.CUBE,
    'cylinder': MarkerMsg.CYLINDER,
}


def declared_span_matches(msg: LaserScan) -> bool:
    """True when angle_max agrees with the sample count to within half an increment."""
    if len(msg.ranges) == 0 or msg.angle_increment == 0.0:
        return True
    derived_max = msg.angle_min + (len(msg.ranges) - 1) * msg.angle_increment
    return abs(derived_max - msg.angle_max) <= abs(msg.angle_increment) / 2.0


def scan_from_msg(msg: LaserScan, logger=None) -> RangeScan:
    """Convert a LaserScan. Sample bearings follow angle_min and angle_increment.

    A declared angle_max that disagrees with the sample count is reported
    through ``logger`` when one is given.
    """
    if logger and not declared_span_matches(msg):
        logger.warn(
            f'LaserScan in "{msg.header.frame_id}" declares angle_max={msg.angle_max:.4f} '
            f'but holds {len(msg.ranges)} samples from angle_min={msg.angle_min:.4f} '
            f'every {msg.angle_increment:.4f}rad',
            throttle_duration_sec=5.0
        )

    return RangeScan(
        ranges=msg.ranges,
        angle_min=msg.angle_min,
        angle_increment=msg.angle_increment,
        range_min=msg.range_min,
        range_max=msg.range_max,
        frame_id=msg.header.frame_id,
        intensities=msg.intensities,
        time_increment=msg.time_increment,
        scan_time=msg.scan_time,
    )


def scan_to_msg(scan: RangeScan, stamp=None) -> LaserScan:
    """Build a LaserScan. ``stamp`` is a builtin_interfaces/Time, e.g. the source scan's."""
    msg = LaserScan()
    msg.header = Header(frame_id=scan.frame_id)
    if stamp is not None:
        msg.header.stamp = stamp
    msg.angle_min = float(scan.angle_min)
    msg.angle_max = float(scan.angle_max)
    msg.angle_increment = float(scan.angle_increment)
    msg.time_increment = float(scan.time_increment)
    msg.scan_time = float(scan.scan_time)
    msg.range_min = float(scan.range_min)
    msg.range_max = float(scan.range_max)
    msg.ranges = list(scan.ranges)
    msg.intensities = list(scan.intensities)
    return msg


def command_from_twist(msg: Twist) -> VelocityCommand:
    return VelocityCommand(linear=msg.linear.x, angular=msg.angular.z)


def twist_from_command(command: VelocityCommand) -> Twist:
    msg = Twist()
    msg.linear.x = float(command.linear)
    msg.angular.z = float(command.angular)
    return msg


def pose_from_msg(msg: PoseMsg, frame_id: str) -> Pose:
    return Pose(
        position=(msg.position.x, msg.position.y, msg.position.z),
        orientation=(msg.orientation.x, msg.orientation.y,
                     msg.orientation.z, msg.orientation.w),
        frame_id=frame_id,
    )


def pose_to_msg(pose: Pose) -> PoseMsg:
    x, y, z = pose.position
    qx, qy, qz, qw = pose.orientation
    msg = PoseMsg()
    msg.position = Point(x=float(x), y=float(y), z=float(z))
    msg.orientation = Quaternion(x=float(qx), y=float(qy), z=float(qz), w=float(qw))
    return msg


def transform_from_msg(msg) -> RigidTransform:
    """Convert a geometry_msgs/TransformStamped."""
    t = msg.transform.translation
    q = msg.transform.rotation
    return RigidTransform(
        translation=(t.x, t.y, t.z),
        rotation=(q.x, q.y, q.z, q.w),
        frame_id=msg.header.frame_id,
        child_frame_id=msg.child_frame_id,
    )


def marker_to_msg(marker: Marker, stamp=None) -> MarkerMsg:
    msg = MarkerMsg()
    msg.header.frame_id = marker.frame_id
    if stamp is not None:
        msg.header.stamp = stamp
    msg.ns = marker.namespace
    msg.id = marker.id
    msg.type = MARKER_TYPES[marker.shape]
    msg.action = MarkerMsg.ADD

    x, y = marker.position
    msg.pose.position = Point(x=float(x), y=float(y), z=0.0)
    msg.pose.orientation = Quaternion(x=0.0, y=0.0, z=0.0, w=1.0)

    sx, sy, sz = marker.scale
    msg.scale = Vector3(x=float(sx), y=float(sy), z=float(sz))
    msg.color = ColorRGBA(
        r=float(marker.color.r),
        g=float(marker.color.g),
        b=float(marker.color.b),
        a=float(marker.color.a),
    )
    return msg
