"""Basic drawing primitives for the playfield buffer."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black (height, width, 3) RGB buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _clip(buffer: Buffer, x: float, y: float, width: float, height: float) -> Tuple[int, int, int, int]:
    h, w = buffer.shape[:2]
    x1 = max(0, min(int(round(x)), w))
    y1 = max(0, min(int(round(y)), h))
    x2 = max(0, min(int(round(x + width)), w))
    y2 = max(0, min(int(round(y + height)), h))
    return x1, y1, x2, y2


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Coordinates may be fractional or partly off-buffer; they are rounded
    and clamped.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 <= x1 or y2 <= y1:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
    else:
        t = max(1, thickness)
        buffer[y1:min(y1 + t, y2), x1:x2] = color
        buffer[max(y2 - t, y1):y2, x1:x2] = color
        buffer[y1:y2, x1:min(x1 + t, x2)] = color
        buffer[y1:y2, max(x2 - t, x1):x2] = color


def blend_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    alpha: float,
) -> None:
    """Blend a solid color over a rectangle of the buffer.

    Args:
        alpha: Opacity of ``color`` (0.0 leaves the buffer untouched)
    """
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 <= x1 or y2 <= y1 or alpha <= 0.0:
        return

    alpha = min(alpha, 1.0)
    region = buffer[y1:y2, x1:x2].astype(np.float32)
    src = np.array(color, dtype=np.float32)
    buffer[y1:y2, x1:x2] = (src * alpha + region * (1 - alpha)).astype(np.uint8)
