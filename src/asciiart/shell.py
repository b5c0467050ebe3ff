import logging
from collections.abc import Callable
from pathlib import Path

from PIL import Image

from asciiart.charsets import ASCII_PRINTABLE, char_range, is_printable
from asciiart.config import Settings
from asciiart.errors import ErrorKind, InvalidPartitionError
from asciiart.glyph_index import GlyphBrightnessIndex
from asciiart.imaging import load_image
from asciiart.output import ConsoleOutput, HtmlOutput
from asciiart.pipeline import AsciiArtPipeline

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT_COMMAND = "exit"


def parse_char_argument(argument: str, printable_only: bool = True) -> str | None:
    """Characters named by an add/remove argument, or None if it is malformed.

    Accepts a single character, ``all``, ``space`` or a range such as ``a-z``.
    """
    if argument == "all":
        return ASCII_PRINTABLE
    if argument == "space":
        return " "
    if len(argument) == 1:
        if printable_only and not is_printable(argument):
            return None
        return argument
    if len(argument) == 3 and argument[1] == "-":
        first, last = argument[0], argument[2]
        if printable_only and not (is_printable(first) and is_printable(last)):
            return None
        return char_range(first, last)
    return None


class Shell:
    """Interactive command loop around one glyph index and one pipeline."""

    def __init__(
        self,
        index: GlyphBrightnessIndex,
        settings: Settings | None = None,
        console: ConsoleOutput | None = None,
    ):
        self.settings = settings or Settings()
        self.index = index
        self.pipeline = AsciiArtPipeline()
        self.resolution = self.settings.resolution
        self.image: Image.Image | None = None
        self.min_resolution = 1
        self.max_resolution = self.settings.resolution
        self.console = console or ConsoleOutput()
        self.html = HtmlOutput(self.settings.html_path, self.settings.html_font)
        self.output = self.console
        self.image_changed = True
        self.res_changed = True
        self._commands: dict[str, Callable[[list[str]], ErrorKind | None]] = {
            "chars": self.print_chars,
            "add": self.add_chars,
            "remove": self.remove_chars,
            "res": self.set_resolution,
            "image": self.set_image,
            "output": self.set_output,
            "asciiArt": self.run_ascii_art,
        }

    def execute(self, line: str) -> ErrorKind | None:
        parts = line.split()
        if not parts:
            return ErrorKind.INCORRECT_COMMAND
        handler = self._commands.get(parts[0])
        if handler is None:
            return ErrorKind.INCORRECT_COMMAND
        return handler(parts)

    def run(self, read_line: Callable[[str], str] | None = None) -> None:
        read_line = read_line or input
        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                break
            if line.strip() == EXIT_COMMAND:
                break
            error = self.execute(line)
            if error is not None:
                print(error.message)

    def print_chars(self, parts: list[str]) -> None:
        print(" ".join(self.index.glyphs))

    def add_chars(self, parts: list[str]) -> ErrorKind | None:
        chars = parse_char_argument(parts[1]) if len(parts) > 1 else None
        if chars is None:
            return ErrorKind.ADD_FORMAT
        for char in chars:
            self.index.add(char)
        return None

    def remove_chars(self, parts: list[str]) -> ErrorKind | None:
        # Removing is lenient: any single character or range is accepted
        chars = parse_char_argument(parts[1], printable_only=False) if len(parts) > 1 else None
        if chars is None:
            return ErrorKind.REMOVE_FORMAT
        for char in chars:
            self.index.remove(char)
        return None

    def set_resolution(self, parts: list[str]) -> ErrorKind | None:
        if len(parts) > 1:
            factor = self.settings.resolution_multiplier
            if parts[1] == "up":
                if self.resolution * factor > self.max_resolution:
                    return ErrorKind.RES_OUT_OF_BOUNDS
                self.resolution *= factor
            elif parts[1] == "down":
                if self.resolution // factor < self.min_resolution:
                    return ErrorKind.RES_OUT_OF_BOUNDS
                self.resolution //= factor
            else:
                return ErrorKind.RES_FORMAT
            self.res_changed = True
        print(f"Resolution set to {self.resolution}.")
        return None

    def set_image(self, parts: list[str]) -> ErrorKind | None:
        if len(parts) < 2:
            return ErrorKind.IMAGE_FORMAT
        try:
            image = load_image(Path(parts[1]))
        except OSError as e:
            logger.debug("Failed to load %s: %s", parts[1], e)
            return ErrorKind.IMAGE_LOAD
        self.use_image(image)
        return None

    def use_image(self, image: Image.Image) -> None:
        """Bind a new image and derive the resolution bounds from its size."""
        self.image = image
        self.max_resolution = image.width
        self.min_resolution = max(1, image.width // image.height)
        if self.resolution > self.max_resolution:
            self.resolution = self.settings.min_resolution_default
        self.image_changed = True
        self.pipeline.invalidate()

    def set_output(self, parts: list[str]) -> ErrorKind | None:
        if len(parts) < 2:
            return ErrorKind.OUTPUT_FORMAT
        if parts[1] == "console":
            self.output = self.console
        elif parts[1] == "html":
            self.output = self.html
        else:
            return ErrorKind.OUTPUT_FORMAT
        return None

    def run_ascii_art(self, parts: list[str]) -> ErrorKind | None:
        if self.image is None:
            return ErrorKind.NO_IMAGE
        if len(self.index) < self.settings.min_charset_size:
            return ErrorKind.CHARSET_TOO_SMALL

        reuse = not (self.image_changed or self.res_changed)
        try:
            art = self.pipeline.run(self.image, self.resolution, self.index, reuse=reuse)
        except InvalidPartitionError as e:
            logger.debug("Partition failed: %s", e)
            return ErrorKind.INVALID_PARTITION
        try:
            self.output.out(art)
        except OSError as e:
            logger.debug("Output failed: %s", e)
            return ErrorKind.OUTPUT_WRITE

        self.image_changed = False
        self.res_changed = False
        return None
