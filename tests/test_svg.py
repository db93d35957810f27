import io

import pytest
from PIL import Image

from backgen.geometry import Frame, Pos
from backgen.paint import Color
from backgen.svg import Document, Path, UnsupportedFormatError


def _doc():
    doc = Document(Frame(0, 0, 100, 50))
    doc.add(
        Path([Pos(0, 0), Pos(10, 0), Pos(10, 10.5)])
        .with_fill_color(Color(1, 2, 3))
        .with_stroke_color(Color(300, 0, 0))
        .with_stroke_width(0.5)
    )
    return doc


def _fake_png(markup):
    buf = io.BytesIO()
    Image.new("RGB", (100, 50), (10, 20, 30)).save(buf, format="PNG")
    return buf.getvalue()


def test_path_markup():
    (path,) = _doc().items
    assert str(path) == '<path d="M 0,0 L 10,0 L 10,10.5 z" fill="rgb(1,2,3)" stroke="rgb(255,0,0)" stroke-width="0.5" />'


def test_document_markup():
    svg = _doc().to_svg()
    assert svg.startswith('<svg viewBox="0 0 100 50"')
    assert 'xmlns="http://www.w3.org/2000/svg"' in svg
    assert svg.count("<path ") == 1
    assert svg.rstrip().endswith("</svg>")
    assert str(_doc()) == svg


@pytest.mark.parametrize("name", ["out.svg", "out.svg.tmp", "OUT.SVG"])
def test_save_svg(tmp_path, name):
    dest = tmp_path / name
    _doc().save(dest)
    assert dest.read_text(encoding="utf-8") == _doc().to_svg()


def test_save_png(tmp_path, monkeypatch):
    monkeypatch.setattr("backgen.svg.svg_to_png", _fake_png)
    for name in ("out.png", "out.png.tmp"):
        _doc().save(tmp_path / name)
        with Image.open(tmp_path / name) as img:
            assert img.size == (100, 50)


@pytest.mark.parametrize("name", ["out.gif", "out.jpg", "out", "out.tmp"])
def test_unsupported_extension(tmp_path, name):
    with pytest.raises(UnsupportedFormatError):
        _doc().save(tmp_path / name)
    assert not (tmp_path / name).exists()
