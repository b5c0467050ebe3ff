import logging
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

PAD_COLOUR = (255, 255, 255)


def _next_power_of_two(n: int) -> int:
    return 1 << (n - 1).bit_length()


def load_image(path: str | Path) -> Image.Image:
    """Open an image file as RGB.

    Missing or undecodable files raise ``OSError`` subclasses from Pillow
    unchanged; reporting them is the caller's job.
    """
    with Image.open(path) as img:
        image = img.convert("RGB")
    logger.debug("Loaded %s (%dx%d)", path, image.width, image.height)
    return image


def pad_image(image: Image.Image) -> Image.Image:
    """Pad both dimensions up to the next power of two, centring the original on white.

    When the split is uneven the extra row/column goes to the bottom/right.
    Images that already have power-of-two dimensions are returned as-is.
    """
    width, height = image.size
    padded_width = _next_power_of_two(width)
    padded_height = _next_power_of_two(height)
    if (padded_width, padded_height) == (width, height):
        return image

    canvas = Image.new("RGB", (padded_width, padded_height), PAD_COLOUR)
    canvas.paste(image.convert("RGB"), ((padded_width - width) // 2, (padded_height - height) // 2))
    return canvas
