from ..models import VelocityCommand


def steer(base_command: VelocityCommand, gain: float, bearing_angle: float) -> VelocityCommand:
    """P-controller on the obstacle bearing: angular = gain * bearing, linear unchanged.

    No saturation is applied. A non-finite bearing gives a non-finite command.
    """
    return VelocityCommand(linear=base_command.linear, angular=gain * bearing_angle)
