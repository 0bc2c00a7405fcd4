from dataclasses import replace
from typing import Protocol

from ..exceptions import FrameLookupError, TransformError
from ..models import Pose, RigidTransform


class TransformLookup(Protocol):
    """Read-only view of a frame transform service (e.g. a tf2 buffer)."""

    def lookup_transform(self, target_frame: str, source_frame: str, time=None) -> RigidTransform:
        """Transform taking source_frame coordinates into target_frame.

        ``time=None`` asks for the latest available transform. Raises
        FrameLookupError or StaleTransformError.
        """
        ...


class PoseTransformer:
    """Re-expresses poses in another frame through a TransformLookup."""

    def __init__(self, lookup: TransformLookup, logger=None):
        """
        Args:
            lookup: Frame transform service to query
            logger: ROS logger instance
        """
        self.lookup = lookup
        self.logger = logger

    def transform(self, source_pose: Pose, source_frame: str, dest_frame: str) -> Pose:
        """
        Transform a pose from source_frame into dest_frame at the latest time.

        Args:
            source_pose: Pose expressed in source_frame
            source_frame: Frame the pose is given in
            dest_frame: Frame to express the pose in

        Returns:
            Pose: new pose with frame_id set to dest_frame

        Raises:
            FrameLookupError: unknown frame, no path between the frames or
                a degenerate transform
            StaleTransformError: transform outside the buffer's time window
        """
        if source_frame == dest_frame:
            return Pose(
                position=source_pose.position,
                orientation=source_pose.orientation,
                frame_id=dest_frame,
            )

        try:
            transform = self.lookup.lookup_transform(dest_frame, source_frame, None)
            pose = transform.apply(source_pose)
        except ValueError as e:
            if self.logger:
                self.logger.debug(f'Unusable transform from "{source_frame}" to "{dest_frame}": {e}')
            raise FrameLookupError(dest_frame, source_frame, str(e)) from e
        except TransformError as e:
            if self.logger:
                self.logger.debug(f'Pose transform failed: {e}')
            raise

        return replace(pose, frame_id=dest_frame)
