import pytest
from PIL import Image

from ansipic.charsets import DEFAULT
from ansipic.cli import main
from helpers import strip_escapes


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "square.png"
    Image.new("RGBA", (20, 20), (255, 128, 0, 255)).save(path)
    return path


def test_renders_with_width(image_path, capsys):
    assert main([str(image_path), "--width", "6"]) == 0
    out = capsys.readouterr().out
    lines = strip_escapes(out).split("\n")
    # three rows of glyphs plus the trailing newline
    assert lines == [DEFAULT[-1] * 6] * 3 + [""]


def test_renders_with_height_and_no_colour(image_path, capsys):
    assert main([str(image_path), "-H", "2", "--no-colour"]) == 0
    assert capsys.readouterr().out == f"{DEFAULT[-1] * 1}\n{DEFAULT[-1] * 1}\n"


def test_threshold_blanks_everything(tmp_path, capsys):
    path = tmp_path / "faint.png"
    Image.new("RGBA", (4, 4), (255, 255, 255, 10)).save(path)
    assert main([str(path), "-W", "2", "-H", "1", "--threshold", "10"]) == 0
    assert capsys.readouterr().out == "  \n"


def test_requires_width_or_height(image_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(image_path)])
    assert excinfo.value.code == 2
    assert "--width or --height" in capsys.readouterr().err


def test_fit_uses_terminal_width(image_path, capsys):
    assert main([str(image_path), "--fit", "--no-colour"]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert len(lines[0]) == 80


@pytest.mark.parametrize("arg", [["--width", "0"], ["--height", "-2"], ["--threshold", "300"]])
def test_rejects_bad_numbers(image_path, arg):
    with pytest.raises(SystemExit) as excinfo:
        main([str(image_path), *arg])
    assert excinfo.value.code == 2


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.png"), "-W", "4"]) == 1
    assert "File not found" in capsys.readouterr().err


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not a png")
    assert main([str(path), "-W", "4"]) == 1
    assert "Could not decode image" in capsys.readouterr().err


def test_charset_choice(image_path, capsys):
    assert main([str(image_path), "-W", "2", "-H", "1", "-c", "blocks", "--no-colour"]) == 0
    assert capsys.readouterr().out == "██\n"


def test_decompression_bomb_reports_error(image_path, monkeypatch, capsys):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    assert main([str(image_path), "-W", "4"]) == 1
    assert "ansipic: Could not decode image" in capsys.readouterr().err
