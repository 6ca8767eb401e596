"""
Backdrop Blur
=============
CPU implementation of the frosted glass effect.

Qt widgets cannot blur what is painted *behind* them (QGraphicsBlurEffect
only blurs the widget itself), so glass surfaces sample an image of the
background instead and blur the region they cover.

Functions:
    qimage_to_array: QImage -> (H, W, 4) uint8 RGBA array.
    array_to_qimage: (H, W, 4) uint8 RGBA array -> QImage.
    gaussian_blur: Blur a whole image.
    blurred_region: Blur the part of an image under a rectangle.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import Qt, QRect
from PySide6.QtGui import QImage, QPainter
from scipy import ndimage

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_FORMAT = QImage.Format.Format_RGBA8888


def qimage_to_array(image: QImage) -> npt.NDArray[np.uint8]:
    """Copy the pixels of `image` into an (height, width, 4) RGBA array."""
    image = image.convertToFormat(_FORMAT)
    width, height = image.width(), image.height()
    buffer = np.frombuffer(image.constBits(), dtype=np.uint8)
    # rows may be padded past width * 4
    rows = buffer[:height * image.bytesPerLine()].reshape(height, image.bytesPerLine())
    return rows[:, :width * 4].reshape(height, width, 4).copy()


def array_to_qimage(array: npt.NDArray[np.uint8]) -> QImage:
    """Build a QImage that owns a copy of the given RGBA array."""
    array = np.ascontiguousarray(array, dtype=np.uint8)
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) array, got shape {array.shape}.")
    height, width, _ = array.shape
    data = array.tobytes()  # must outlive the wrapping QImage until copy()
    image = QImage(data, width, height, width * 4, _FORMAT)
    return image.copy()


def gaussian_blur(image: QImage, sigma: float) -> QImage:
    """
    Gaussian blur with the same sigma along both axes.

    Args:
        image: Source image, any format.
        sigma: Standard deviation in pixels. Values <= 0 return a plain copy.

    Returns:
        A new RGBA8888 image of the same size.
    """
    if image.isNull():
        raise ValueError("Cannot blur a null image.")
    if sigma <= 0:
        return image.convertToFormat(_FORMAT)

    pixels = qimage_to_array(image).astype(np.float32)
    blurred = ndimage.gaussian_filter(pixels, sigma=(sigma, sigma, 0), mode="nearest")
    return array_to_qimage(np.clip(np.rint(blurred), 0, 255).astype(np.uint8))


def blurred_region(source: QImage, rect: QRect, sigma: float) -> QImage:
    """
    Blur the part of `source` covered by `rect`.

    The source is sampled with a 3 * sigma margin around `rect` so that the
    edges of the result are blurred with the surrounding content rather than
    with a hard border. Parts of `rect` outside the source stay transparent.
    """
    if source.isNull():
        raise ValueError("Cannot blur a null image.")

    result = QImage(rect.size(), _FORMAT)
    result.fill(Qt.GlobalColor.transparent)

    margin = math.ceil(3 * max(sigma, 0.0))
    window = rect.adjusted(-margin, -margin, margin, margin).intersected(source.rect())
    if window.isEmpty():
        return result

    logger.debug(f"Blurring {window.width()}x{window.height()} px window (sigma={sigma}).")
    blurred = gaussian_blur(source.copy(window), sigma)

    painter = QPainter(result)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
    painter.drawImage(window.topLeft() - rect.topLeft(), blurred)
    painter.end()
    return result
