import logging

import numpy as np
from PIL import Image

from asciiart.glyph_index import GlyphBrightnessIndex
from asciiart.imaging import pad_image
from asciiart.sampling import brightness_grid, partition_image

logger = logging.getLogger(__name__)


class AsciiArtPipeline:
    """Converts images to glyph grids, keeping the last brightness grid for reuse.

    One pipeline holds the brightness grid of one (image, resolution) pair.
    Reusing it lets the glyph set change between runs without touching pixel
    data again.
    """

    def __init__(self):
        self._image: Image.Image | None = None
        self._resolution: int | None = None
        self._brightness: np.ndarray | None = None

    @property
    def has_cache(self) -> bool:
        return self._brightness is not None

    def invalidate(self) -> None:
        self._image = None
        self._resolution = None
        self._brightness = None

    def _cache_matches(self, image: Image.Image, resolution: int) -> bool:
        return (
            self._brightness is not None
            and self._image is image
            and self._resolution == resolution
            and self._brightness.shape[1] == resolution
        )

    def compute_brightness(self, image: Image.Image, resolution: int) -> np.ndarray:
        """Pad, partition and measure an image, storing the result as the cache."""
        self.invalidate()
        padded = pad_image(image)
        blocks = partition_image(padded, resolution)
        grid = brightness_grid(blocks)
        logger.debug(
            "Computed %dx%d brightness grid from %dx%d padded image",
            grid.shape[0],
            grid.shape[1],
            padded.width,
            padded.height,
        )
        self._image = image
        self._resolution = resolution
        self._brightness = grid
        return grid

    def run(
        self,
        image: Image.Image,
        resolution: int,
        index: GlyphBrightnessIndex,
        reuse: bool = False,
    ) -> list[str]:
        """Render an image as rows of glyphs, ``resolution`` glyphs per row.

        With ``reuse`` the brightness grid from the previous run is looked up
        again against the current index. If there is no previous grid, or it
        belongs to a different image or resolution, it is recomputed.
        """
        if reuse and self._cache_matches(image, resolution):
            logger.debug("Reusing cached brightness grid")
            grid = self._brightness
        else:
            if reuse:
                logger.warning("Cached brightness grid is missing or stale, recomputing")
            grid = self.compute_brightness(image, resolution)
        return index.lookup_grid(grid)
