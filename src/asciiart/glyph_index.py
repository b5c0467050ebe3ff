"""Ordered index from glyph brightness to glyphs, with nearest-brightness lookup."""

import logging
from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable, Iterator

import numpy as np

from asciiart.errors import EmptyIndexError
from asciiart.glyphs import GlyphRenderer, ink_fraction

logger = logging.getLogger(__name__)


class GlyphBrightnessIndex:
    """Active glyphs grouped by rendered brightness.

    Distinct brightness values are kept in an ascending list; each maps to the
    glyphs sharing it, sorted by code point. Glyph brightness is computed once
    per character and remembered even after the glyph is removed.
    """

    def __init__(self, renderer: GlyphRenderer, glyphs: Iterable[str] = ()):
        self.renderer = renderer
        self._keys: list[float] = []
        self._groups: dict[float, list[str]] = {}
        self._active: set[str] = set()
        self._brightness: dict[str, float] = {}
        for char in glyphs:
            self.add(char)

    def __len__(self) -> int:
        return len(self._active)

    def __contains__(self, char: object) -> bool:
        return char in self._active

    def __iter__(self) -> Iterator[str]:
        return iter(self.glyphs)

    @property
    def glyphs(self) -> list[str]:
        """Active glyphs in code-point order."""
        return sorted(self._active)

    def keys(self) -> tuple[float, ...]:
        return tuple(self._keys)

    def groups(self) -> dict[float, tuple[str, ...]]:
        return {key: tuple(self._groups[key]) for key in self._keys}

    def brightness(self, char: str) -> float:
        """Ink fraction of a glyph's rendered bitmap, rendering it on first use."""
        if char not in self._brightness:
            value = ink_fraction(self.renderer.render(char))
            logger.debug("Brightness of %r is %.4f", char, value)
            self._brightness[char] = value
        return self._brightness[char]

    def add(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Glyph must be a single character, got {char!r}")
        if char in self._active:
            return
        key = self.brightness(char)
        group = self._groups.get(key)
        if group is None:
            self._groups[key] = [char]
            insort(self._keys, key)
        else:
            insort(group, char)
        self._active.add(char)

    def remove(self, char: str) -> None:
        if char not in self._active:
            return
        key = self._brightness[char]
        group = self._groups[key]
        group.remove(char)
        self._active.discard(char)
        if not group:
            del self._groups[key]
            del self._keys[bisect_left(self._keys, key)]

    def _nearest_key(self, target: float) -> float:
        # Largest key <= target and smallest key >= target
        i = bisect_right(self._keys, target)
        floor = self._keys[i - 1] if i > 0 else None
        j = bisect_left(self._keys, target)
        ceiling = self._keys[j] if j < len(self._keys) else None

        if floor is None:
            return ceiling
        if ceiling is None:
            return floor
        # Ties go to the darker key
        if abs(target - floor) <= abs(ceiling - target):
            return floor
        return ceiling

    def lookup(self, brightness: float) -> str:
        """Glyph whose brightness is nearest to a block brightness in [0, 1].

        The block brightness is first stretched onto the range spanned by the
        active glyphs, ``brightness * (max - min) + min``, so the darkest and
        brightest blocks always map to the darkest and brightest glyphs.
        """
        if not self._keys:
            raise EmptyIndexError("Cannot look up a glyph in an empty index")
        lo, hi = self._keys[0], self._keys[-1]
        target = brightness * (hi - lo) + lo
        return self._groups[self._nearest_key(target)][0]

    def lookup_grid(self, grid: np.ndarray) -> list[str]:
        """Look up every value of a 2D brightness grid. Returns one string per row."""
        if not self._keys:
            raise EmptyIndexError("Cannot look up a glyph in an empty index")
        return ["".join(self.lookup(float(value)) for value in row) for row in np.asarray(grid)]
