class HighlevelControllerError(Exception):
    """Base class for errors raised by the controller core."""


class NoValidRangeError(HighlevelControllerError):
    """Scan is empty or holds no finite sample within [range_min, range_max]."""


class IndexOutOfRangeError(HighlevelControllerError, IndexError):
    """Sample index outside the scan. Indicates a caller bug."""

    def __init__(self, index, size):
        super().__init__(f'Index {index} outside scan of {size} samples')
        self.index = index
        self.size = size


class TransformError(HighlevelControllerError):
    """Base class for transient frame transform failures."""

    def __init__(self, target_frame, source_frame, reason=''):
        message = f'Cannot transform from "{source_frame}" to "{target_frame}"'
        if reason:
            message = f'{message}: {reason}'
        super().__init__(message)
        self.target_frame = target_frame
        self.source_frame = source_frame


class FrameLookupError(TransformError):
    """Frame unknown or no transform path between the two frames."""


class StaleTransformError(TransformError):
    """Requested time lies outside the transform buffer's retained window."""
