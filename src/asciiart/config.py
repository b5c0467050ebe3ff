from dataclasses import dataclass

from asciiart.charsets import DIGITS


@dataclass(frozen=True)
class Settings:
    charset: str = DIGITS
    resolution: int = 128
    # Resolution the shell falls back to when a new image is narrower than the current one
    min_resolution_default: int = 2
    min_charset_size: int = 2
    resolution_multiplier: int = 2
    glyph_size: int = 16
    font_path: str | None = None
    html_path: str = "out.html"
    html_font: str = "Courier New"
