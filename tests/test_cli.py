import pytest
from PIL import Image

from asciitile.cli import build_parser, main


def make_image_file(tmp_path, colour=(0, 0, 0), size=(16, 16)):
    path = tmp_path / "in.png"
    Image.new("RGB", size, colour).save(path)
    return path


def test_parser_defaults():
    args = build_parser().parse_args(["img.png"])
    assert args.resolution is None
    assert args.rounding is None
    assert args.interactive is False


def test_renders_to_console(tmp_path, capsys):
    path = make_image_file(tmp_path, colour=(255, 255, 255))
    main([str(path), "-r", "4", "-c", " "])
    out = capsys.readouterr().out
    assert out == "    \n" * 4


def test_renders_html(tmp_path):
    path = make_image_file(tmp_path)
    html_path = tmp_path / "art.html"
    main([str(path), "-o", "html", "--html-path", str(html_path)])
    assert html_path.exists()
    assert "<pre" in html_path.read_text(encoding="utf-8")


def test_missing_image_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png")])
    assert exc.value.code == 1
    assert "problem with image file" in capsys.readouterr().err


def test_empty_charset_exits(tmp_path, capsys):
    path = make_image_file(tmp_path)
    with pytest.raises(SystemExit):
        main([str(path), "-c", ""])
    assert "Charset is empty" in capsys.readouterr().err


def test_interactive_mode(tmp_path, capsys, monkeypatch):
    path = make_image_file(tmp_path)
    lines = iter(["chars", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))
    main([str(path), "-i", "-c", "01"])
    assert "0 1" in capsys.readouterr().out
