from .exceptions import (
    FrameLookupError,
    HighlevelControllerError,
    IndexOutOfRangeError,
    NoValidRangeError,
    StaleTransformError,
    TransformError,
)
