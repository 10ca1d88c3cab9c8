"""Image edits on RGB arrays, dialog value parsing and an undoable editor."""

from __future__ import annotations

import os
from typing import Callable, Optional, Sequence, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

PathLike = Union[str, os.PathLike]

ALLOWED_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp")

BLUR_RANGE = (0, 10)
BRIGHTNESS_RANGE = (-255, 255)
CONTRAST_SLIDER_RANGE = (0, 400)

_GRAY_WEIGHTS = np.array([0.299, 0.587, 0.114])


def _as_rgb(image: np.ndarray) -> np.ndarray:
    """Return ``image`` as an (height, width, 3) uint8 array."""
    data = np.asarray(image)
    if data.ndim == 2:
        data = np.repeat(data[:, :, np.newaxis], 3, axis=2)
    elif data.ndim == 3 and data.shape[2] == 1:
        data = np.repeat(data, 3, axis=2)
    elif data.ndim == 3 and data.shape[2] == 4:
        data = data[:, :, :3]
    elif not (data.ndim == 3 and data.shape[2] == 3):
        raise ValueError(f"unsupported image shape {data.shape}")
    return np.clip(data, 0, 255).astype(np.uint8)


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """Replace each pixel by its luma, kept as three equal channels."""
    rgb = _as_rgb(image).astype(np.float64)
    luma = np.clip(np.rint(rgb @ _GRAY_WEIGHTS), 0, 255).astype(np.uint8)
    return np.repeat(luma[:, :, np.newaxis], 3, axis=2)


def _blur_axis(data: np.ndarray, radius: int, axis: int) -> np.ndarray:
    size = data.shape[axis]
    zero_shape = list(data.shape)
    zero_shape[axis] = 1
    sums = np.concatenate(
        [np.zeros(zero_shape, dtype=np.int64), np.cumsum(data, axis=axis)], axis=axis
    )
    positions = np.arange(size)
    low = np.clip(positions - radius, 0, size)
    high = np.clip(positions + radius + 1, 0, size)
    window = np.take(sums, high, axis=axis) - np.take(sums, low, axis=axis)
    count_shape = [1] * data.ndim
    count_shape[axis] = size
    counts = (high - low).reshape(count_shape)
    return window // counts


def box_blur(image: np.ndarray, radius: int) -> np.ndarray:
    """Average each pixel over a square of side ``2 * radius + 1``.

    Near the edges only pixels inside the image are counted.
    """
    if radius < 0:
        raise ValueError(f"blur radius must not be negative: {radius}")
    data = _as_rgb(image).astype(np.int64)
    if radius == 0 or data.size == 0:
        return data.astype(np.uint8)
    data = _blur_axis(data, radius, axis=1)
    data = _blur_axis(data, radius, axis=0)
    return data.astype(np.uint8)


def adjust_brightness(image: np.ndarray, amount: int) -> np.ndarray:
    """Add ``amount`` to every channel, saturating at 0 and 255."""
    data = _as_rgb(image).astype(np.int32) + int(amount)
    return np.clip(data, 0, 255).astype(np.uint8)


def adjust_contrast(image: np.ndarray, factor: float) -> np.ndarray:
    """Multiply every channel by ``factor``, rounding and saturating."""
    data = np.rint(_as_rgb(image).astype(np.float64) * factor)
    return np.clip(data, 0, 255).astype(np.uint8)


def crop(image: np.ndarray, top_x: int, top_y: int, bottom_x: int, bottom_y: int) -> np.ndarray:
    """Cut out the rectangle from (top_x, top_y) up to (bottom_x, bottom_y).

    Raises ValueError when the rectangle is empty or leaves the image.
    """
    data = _as_rgb(image)
    height, width = data.shape[:2]
    if bottom_x <= top_x or bottom_y <= top_y:
        raise ValueError("crop rectangle is empty")
    if top_x < 0 or top_y < 0 or bottom_x > width or bottom_y > height:
        raise ValueError(f"crop rectangle lies outside the {width}x{height} image")
    return data[top_y:bottom_y, top_x:bottom_x].copy()


def resize(image: np.ndarray, width: int, height: int) -> np.ndarray:
    """Scale the image to ``width`` by ``height`` pixels (nearest neighbour)."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid size {width}x{height}")
    picture = Image.fromarray(_as_rgb(image), mode="RGB")
    return np.asarray(picture.resize((width, height), Image.NEAREST)).copy()


def contrast_factor(slider_value: int) -> float:
    """Convert a contrast slider position (0 to 400) into a multiplier."""
    low, high = CONTRAST_SLIDER_RANGE
    if not low <= slider_value <= high:
        raise ValueError(f"contrast slider value must be in {low}..{high}")
    return slider_value / 100.0


def _parse_numbers(texts: Sequence[str], count: int, what: str) -> list[int]:
    if len(texts) != count:
        raise ValueError(f"{what} needs {count} values, got {len(texts)}")
    values = []
    for text in texts:
        try:
            values.append(int(float(text.strip())))
        except (ValueError, OverflowError):
            raise ValueError(f"{what}: not a number: {text!r}") from None
    return values


def parse_crop_values(texts: Sequence[str]) -> list[int]:
    """Read top x, top y, bottom x and bottom y; fractions are truncated."""
    return _parse_numbers(texts, 4, "crop")


def parse_resize_values(texts: Sequence[str]) -> list[int]:
    """Read width and height; fractions are truncated."""
    return _parse_numbers(texts, 2, "resize")


def load_image(path: PathLike) -> np.ndarray:
    """Read an image file as an RGB array.

    Raises FileNotFoundError for a missing file and ValueError when the
    file is not an image.
    """
    try:
        with Image.open(path) as picture:
            return np.asarray(picture.convert("RGB")).copy()
    except UnidentifiedImageError:
        raise ValueError("Failed to load image file") from None


def save_image(image: np.ndarray, path: PathLike) -> None:
    """Write the image; the format follows the file extension."""
    Image.fromarray(_as_rgb(image), mode="RGB").save(path)


class ImageEditor:
    """The image being edited and the earlier versions kept for undo."""

    def __init__(self) -> None:
        self.image: Optional[np.ndarray] = None
        self.history: list[np.ndarray] = []

    def _require_image(self) -> np.ndarray:
        if self.image is None:
            raise ValueError("No image loaded")
        return self.image

    def load(self, path: PathLike) -> np.ndarray:
        """Open a file as the new image and start a fresh history."""
        self.image = load_image(path)
        self.history = [self.image.copy()]
        return self.image

    def apply(self, operation: Callable[..., np.ndarray], *args) -> np.ndarray:
        """Replace the image with ``operation(image, *args)``, keeping the old one."""
        current = self._require_image()
        result = operation(current, *args)
        self.history.append(current.copy())
        self.image = result
        return result

    def undo(self) -> np.ndarray:
        """Go back to the last kept version; the first one is never dropped."""
        if not self.history:
            raise ValueError("Nothing to undo")
        self.image = self.history[-1].copy()
        if len(self.history) > 1:
            self.history.pop()
        return self.image

    def save(self, path: PathLike) -> None:
        save_image(self._require_image(), path)