from dataclasses import dataclass
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    RED: ClassVar['Color']
    GREEN: ClassVar['Color']
    BLUE: ClassVar['Color']


Color.RED = Color(r=1.0)
Color.GREEN = Color(g=1.0)
Color.BLUE = Color(b=1.0)


@dataclass(frozen=True)
class Marker:
    """Renderable point marker, published once and replaced by id."""
    position: Tuple[float, float]
    frame_id: str
    id: int
    color: Color
    namespace: str = 'closest_point'
    shape: str = 'sphere'
    scale: Tuple[float, float, float] = (0.1, 0.1, 0.1)  # diameter in meters
