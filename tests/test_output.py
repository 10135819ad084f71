import io

import numpy as np
import pytest

from asciitile.output import ConsoleOutput, HtmlOutput, build_output
from asciitile.renderer import CharGrid


def make_grid(rows=("<@>", "& #")):
    return CharGrid(rows=list(rows), brightness=np.zeros((len(rows), len(rows[0]))))


def test_console_writes_rows():
    stream = io.StringIO()
    ConsoleOutput(stream).out(make_grid())
    assert stream.getvalue() == "<@>\n& #\n"


def test_html_escapes_and_sets_font(tmp_path):
    path = tmp_path / "out.html"
    HtmlOutput(path, "Courier New").out(make_grid())
    text = path.read_text(encoding="utf-8")
    assert "&lt;@&gt;\n&amp; #" in text
    assert "font-family: 'Courier New'" in text
    assert text.startswith("<!DOCTYPE html>")


def test_build_output():
    assert isinstance(build_output("console", "out.html", "Courier New"), ConsoleOutput)
    html = build_output("html", "x.html", "Mono")
    assert isinstance(html, HtmlOutput)
    assert html.font == "Mono"
    with pytest.raises(ValueError):
        build_output("pdf", "out.html", "Courier New")
