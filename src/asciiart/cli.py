import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from asciiart.config import Settings
from asciiart.errors import AsciiArtError
from asciiart.glyph_index import GlyphBrightnessIndex
from asciiart.glyphs import FontGlyphRenderer
from asciiart.imaging import load_image
from asciiart.log import setup_logging
from asciiart.output import ConsoleOutput, HtmlOutput
from asciiart.pipeline import AsciiArtPipeline
from asciiart.shell import Shell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = Settings()
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", nargs="?", help="Path to input image")
    parser.add_argument(
        "-r",
        "--resolution",
        type=int,
        default=None,
        help=(
            f"Characters per row; must divide the padded image width (default: {defaults.resolution}, "
            f"or {defaults.min_resolution_default} for images narrower than that)"
        ),
    )
    parser.add_argument(
        "-c", "--chars", default=defaults.charset, help=f"Characters to draw with (default: {defaults.charset})"
    )
    parser.add_argument("-f", "--font", default=None, help="TrueType font used to measure glyphs")
    parser.add_argument("--html", metavar="PATH", default=None, help="Write an HTML page instead of printing")
    parser.add_argument(
        "-i", "--interactive", action="store_true", default=False, help="Start the interactive shell"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.verbose)

    defaults = Settings()
    settings = dataclasses.replace(
        defaults,
        charset=args.chars,
        resolution=args.resolution if args.resolution is not None else defaults.resolution,
        font_path=args.font,
        html_path=args.html or defaults.html_path,
    )
    logger.debug("Settings: %s", settings)
    renderer = FontGlyphRenderer(settings.font_path, settings.glyph_size)
    index = GlyphBrightnessIndex(renderer, settings.charset)

    image = None
    if args.image is not None:
        image_path = Path(args.image)
        if not image_path.exists():
            print(f"File not found: {image_path}", file=sys.stderr)
            sys.exit(1)
        try:
            image = load_image(image_path)
        except OSError as e:
            print(f"Could not load image {image_path}: {e}", file=sys.stderr)
            sys.exit(1)

    if args.interactive or image is None:
        shell = Shell(index, settings)
        if image is not None:
            shell.use_image(image)
        shell.run()
        return

    if len(index) < settings.min_charset_size:
        print(f"Need at least {settings.min_charset_size} characters", file=sys.stderr)
        sys.exit(1)

    resolution = settings.resolution
    # Same fallback as the shell when the default is wider than the image
    if args.resolution is None and resolution > image.width:
        resolution = settings.min_resolution_default

    try:
        art = AsciiArtPipeline().run(image, resolution, index)
    except AsciiArtError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    output = HtmlOutput(settings.html_path, settings.html_font) if args.html else ConsoleOutput()
    output.out(art)
