import shutil
import subprocess

import numpy as np
import pytest

from asciiart.glyph_index import GlyphBrightnessIndex
from asciiart.glyphs import GLYPH_SIZE

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if shutil.os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


class InkRenderer:
    """Deterministic stand-in for a font: each glyph lights a known number of cells."""

    size = GLYPH_SIZE

    def __init__(self, ink: dict[str, int] | None = None):
        self.ink = ink or {}
        self.calls: list[str] = []

    def render(self, char: str) -> np.ndarray:
        self.calls.append(char)
        cells = self.size * self.size
        count = self.ink.get(char, (ord(char) * 7) % (cells + 1))
        mask = np.zeros(cells, dtype=bool)
        mask[:count] = True
        return mask.reshape(self.size, self.size)


# '.' empty, '-' half inked, '#' fully inked
THREE_LEVELS = {".": 0, "-": 128, "#": 256}


@pytest.fixture
def renderer():
    return InkRenderer(dict(THREE_LEVELS))


@pytest.fixture
def make_index(renderer):
    def _make(glyphs=".#"):
        return GlyphBrightnessIndex(renderer, glyphs)

    return _make
