import html
import sys
from pathlib import Path
from typing import TextIO

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII Art</title>
</head>
<body style="background-color: white;">
<pre style="font-family: '{font}', monospace; font-size: 8px; line-height: 0.75;">
{body}
</pre>
</body>
</html>
"""


def format_console(grid: list[str]) -> str:
    """One line per row, glyphs separated by a space to roughly square them up."""
    return "\n".join(" ".join(row) for row in grid)


def format_html(grid: list[str], font: str = "Courier New") -> str:
    body = "\n".join(html.escape(row) for row in grid)
    return HTML_TEMPLATE.format(font=html.escape(font, quote=True), body=body)


class ConsoleOutput:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def out(self, grid: list[str]) -> None:
        print(format_console(grid), file=self.stream or sys.stdout)


class HtmlOutput:
    def __init__(self, path: str | Path = "out.html", font: str = "Courier New"):
        self.path = Path(path)
        self.font = font

    def out(self, grid: list[str]) -> None:
        self.path.write_text(format_html(grid, self.font), encoding="utf-8")
