import html
import sys
from pathlib import Path
from typing import Protocol, TextIO

from asciitile.renderer import CharGrid

OUTPUTS = ("console", "html")

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII art</title>
</head>
<body>
<pre style="font-family: '{font}', monospace; font-size: 8px; line-height: 1.0; letter-spacing: 0.3em;">
{body}
</pre>
</body>
</html>
"""


class Output(Protocol):
    def out(self, grid: CharGrid) -> None:
        """Emit a rendered character grid."""
        ...


class ConsoleOutput:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def out(self, grid: CharGrid) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        for row in grid.rows:
            print(row, file=stream)


class HtmlOutput:
    """Write the grid as preformatted text in an HTML page, using the given font."""

    def __init__(self, path: str | Path, font: str):
        self.path = Path(path)
        self.font = font

    def render_html(self, grid: CharGrid) -> str:
        body = "\n".join(html.escape(row) for row in grid.rows)
        return HTML_TEMPLATE.format(font=html.escape(self.font), body=body)

    def out(self, grid: CharGrid) -> None:
        self.path.write_text(self.render_html(grid), encoding="utf-8")


def build_output(name: str, html_path: str | Path, html_font: str) -> Output:
    if name == "html":
        return HtmlOutput(html_path, html_font)
    if name == "console":
        return ConsoleOutput()
    raise ValueError(f"Unknown output: {name!r}")
