"""Image loading, rotation and scaling with Pillow."""
import logging
import math
from enum import Flag
from pathlib import Path
from typing import Union

from PIL import Image, ImageOps

from curvekit.geometry import Size
from curvekit.types import ImageError

logger = logging.getLogger(__name__)


class RotationOptions(Flag):
    """Flips applied before rotating."""
    NONE = 0
    FLIP_ON_VERTICAL_AXIS = 1
    FLIP_ON_HORIZONTAL_AXIS = 2


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Load an image file.

    EXIF orientation is applied so the pixels are upright.

    Args:
        path: Path to image file

    Returns:
        Loaded PIL image

    Raises:
        FileNotFoundError: If file doesn't exist
        ImageError: If file cannot be loaded
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    if not path.is_file():
        raise ImageError(f"Path is not a file: {path}")

    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            img.load()
            return img
    except (IOError, OSError) as e:
        raise ImageError(f"Failed to load image {path}: {e}")


def rotated(
    image: Image.Image,
    angle_radians: float,
    options: RotationOptions = RotationOptions.NONE
) -> Image.Image:
    """
    Rotate an image, growing the canvas to fit.

    Args:
        image: Source image
        angle_radians: Rotation angle; positive is clockwise on screen
            (y axis pointing down)
        options: Flips, applied in the image's own frame before rotating

    Returns:
        New image sized to the rotated bounding box
    """
    if image.width == 0 or image.height == 0:
        raise ImageError("Cannot rotate an empty image")

    if RotationOptions.FLIP_ON_VERTICAL_AXIS in options:
        image = ImageOps.mirror(image)
    if RotationOptions.FLIP_ON_HORIZONTAL_AXIS in options:
        image = ImageOps.flip(image)

    # Pillow rotates counter-clockwise for positive degrees
    result = image.rotate(
        -math.degrees(angle_radians),
        resample=Image.Resampling.BICUBIC,
        expand=True,
    )
    logger.debug(
        f"Rotated {image.width}x{image.height} by {angle_radians:.4f} rad "
        f"-> {result.width}x{result.height}"
    )
    return result


def scale_to_size(image: Image.Image, size: Size) -> Image.Image:
    """
    Scale an image to a size, ignoring its aspect ratio.

    Fractional sizes are rounded up to whole pixels.

    Args:
        image: Source image
        size: Target size

    Returns:
        Resized image
    """
    width = int(math.ceil(size.width))
    height = int(math.ceil(size.height))
    if width <= 0 or height <= 0:
        raise ImageError(f"Cannot scale to {size.width}x{size.height}")
    return image.resize((width, height), resample=Image.Resampling.LANCZOS)


def scale_to_width(image: Image.Image, width: float) -> Image.Image:
    """Scale to a width, keeping the aspect ratio."""
    if image.width == 0:
        raise ImageError("Cannot scale an image with zero width")
    ratio = width / image.width
    return scale_to_size(image, Size(width, ratio * image.height))


def scale_to_height(image: Image.Image, height: float) -> Image.Image:
    """Scale to a height, keeping the aspect ratio."""
    if image.height == 0:
        raise ImageError("Cannot scale an image with zero height")
    ratio = height / image.height
    return scale_to_size(image, Size(ratio * image.width, height))
