"""Image export utilities for rendered canvases.

Supported formats:
    - PPM (plain-text P3, 8 bits per channel)
    - PNG (8-bit RGB via Pillow)

Both formats encode each channel as ``min(255, round(c * 255))`` with
negative values clamped to 0. No tone mapping or gamma is applied: the
canvas is written as-is.

Example:
    >>> from src.phongtrace.preview.canvas import Canvas
    >>> from src.phongtrace.preview.export import canvas_to_ppm
    >>> canvas = Canvas(2, 1)
    >>> canvas_to_ppm(canvas)
    'P3\\n2 1\\n255\\n0 0 0 0 0 0\\n'
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.phongtrace.preview.canvas import Canvas

logger = logging.getLogger(__name__)

# Plain PPM readers are not required to accept longer lines
PPM_MAX_LINE_LENGTH = 70


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to 8-bit channels.

    Rounds half away from zero, so 0.5 maps to 128.

    Args:
        image: Image array of shape (H, W, 3) with nominal range [0, 1].

    Returns:
        Array of the same shape with dtype uint8.
    """
    scaled = np.floor(np.asarray(image, dtype=np.float64) * 255.0 + 0.5)
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as a plain-text PPM (P3) document.

    Each pixel row starts on a new line and is wrapped so that no line
    exceeds 70 characters. The document ends with a newline.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The PPM document as a string.
    """
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    encoded = image_to_uint8(canvas.to_numpy())

    for row in encoded:
        line = ""
        for token in (str(int(value)) for value in row.reshape(-1)):
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Write a canvas to ``filepath`` as a plain-text PPM file.

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.write_text(canvas_to_ppm(canvas), encoding="ascii")
    logger.debug("Wrote %dx%d PPM to %s", canvas.width, canvas.height, path)
    return path


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Write a canvas to ``filepath`` as an 8-bit RGB PNG.

    Returns:
        The path written.
    """
    path = Path(filepath)
    image_uint8 = image_to_uint8(canvas.to_numpy())

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(path)
    logger.debug("Wrote %dx%d PNG to %s", canvas.width, canvas.height, path)
    return path


def save_image(canvas: Canvas, filepath: str | Path) -> Path:
    """Write a canvas, choosing the format from the file suffix.

    Raises:
        ValueError: If the suffix is neither ``.ppm`` nor ``.png``.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        return save_ppm(canvas, path)
    if suffix == ".png":
        return save_png(canvas, path)
    raise ValueError(f"Unsupported image format: {path.suffix!r} (use .ppm or .png)")
