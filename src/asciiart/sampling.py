import numpy as np
from PIL import Image

from asciiart.errors import InvalidPartitionError

# Relative luminance weights, applied directly to 0-255 channel values
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
CHANNEL_MAX = 255


def partition_image(image: Image.Image, resolution: int) -> np.ndarray:
    """Split an image into ``resolution`` square blocks per row.

    Returns a uint8 array of shape (rows, resolution, block_size, block_size, 3),
    where block (i, j) is a copy of source rows [i*bs, (i+1)*bs) and columns
    [j*bs, (j+1)*bs).
    """
    width, height = image.size
    if resolution < 1 or resolution > width:
        raise InvalidPartitionError(f"Resolution {resolution} out of range for width {width}")
    if width % resolution:
        raise InvalidPartitionError(f"Resolution {resolution} does not divide width {width}")
    block_size = width // resolution
    if height % block_size:
        raise InvalidPartitionError(f"Block size {block_size} does not divide height {height}")

    arr = np.asarray(image.convert("RGB"), dtype=np.uint8)
    rows = height // block_size
    # (rows, bs, cols, bs, 3) -> (rows, cols, bs, bs, 3)
    blocks = arr.reshape(rows, block_size, resolution, block_size, 3).transpose(0, 2, 1, 3, 4)
    return np.ascontiguousarray(blocks)


def block_brightness(block: np.ndarray) -> float:
    """Mean weighted luminance of an (h, w, 3) block, normalised to [0, 1]."""
    pixels = np.asarray(block, dtype=np.float64).reshape(-1, 3)
    if len(pixels) == 0:
        raise ValueError("Cannot compute brightness of an empty block")
    return float((pixels @ LUMINANCE_WEIGHTS).sum() / (len(pixels) * CHANNEL_MAX))


def brightness_grid(blocks: np.ndarray) -> np.ndarray:
    """Brightness of every block in a partition. Returns array of shape (rows, cols)."""
    rows, cols, block_h, block_w, _ = blocks.shape
    luminance = blocks.astype(np.float64) @ LUMINANCE_WEIGHTS  # (rows, cols, bs, bs)
    return luminance.sum(axis=(2, 3)) / (block_h * block_w * CHANNEL_MAX)
