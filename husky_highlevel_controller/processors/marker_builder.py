from ..models import Color, Marker


def build_marker(x: float, y: float, frame_id: str, marker_id: int, color: Color) -> Marker:
    """Sphere marker at (x, y) in frame_id. Publishing an existing id replaces it."""
    return Marker(position=(x, y), frame_id=frame_id, id=marker_id, color=color)
