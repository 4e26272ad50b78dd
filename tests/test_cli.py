import pytest
from PIL import Image

from asciimage import cli
from asciimage.terminal import RESET


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "checker.png"
    img = Image.new("RGB", (2, 2), (0, 0, 0))
    img.putpixel((1, 0), (255, 255, 255))
    img.putpixel((0, 1), (255, 255, 255))
    img.save(path)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ASCIIMAGE_GLYPHS", "ASCIIMAGE_COLOURS", "ASCIIMAGE_LOG_LEVEL", "ASCIIMAGE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_no_arguments_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage: asciimage" in capsys.readouterr().out


def test_ascii_default_mode(image_path, capsys):
    assert cli.main([str(image_path)]) == 0
    assert capsys.readouterr().out == " @\n@ \n"


def test_ascii_custom_ramp(image_path, capsys):
    assert cli.main([str(image_path), "ASCII", ".X"]) == 0
    assert capsys.readouterr().out == ".X\nX.\n"


def test_color_mode(image_path, capsys):
    assert cli.main([str(image_path), "COLOR", "0C"]) == 0
    out = capsys.readouterr().out
    assert "\033[0;40m" in out  # black background
    assert "\033[0;101m" in out  # light red background
    assert out.endswith(RESET + "\n")


def test_ascol_mode(image_path, capsys):
    assert cli.main([str(image_path), "ascol", "2E", "oO"]) == 0
    out = capsys.readouterr().out
    assert "\033[0;32mo" in out
    assert "\033[0;93mO" in out


def test_missing_image(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.png")]) == 1
    assert "[!]" in capsys.readouterr().err


def test_empty_ramp_is_usage_error(image_path):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(image_path), "ASCII", ""])
    assert exc.value.code == 2


def test_invalid_colour_digit(image_path, capsys):
    with pytest.raises(SystemExit):
        cli.main([str(image_path), "COLOR", "0Z"])
    assert "Invalid colour digit" in capsys.readouterr().err


def test_too_many_maps(image_path):
    with pytest.raises(SystemExit):
        cli.main([str(image_path), "COLOR", "01", "ab"])


def test_unknown_mode(image_path):
    with pytest.raises(SystemExit):
        cli.main([str(image_path), "SEPIA"])


def test_glyph_ramp_from_environment(image_path, capsys, monkeypatch):
    monkeypatch.setenv("ASCIIMAGE_GLYPHS", "ab")
    assert cli.main([str(image_path)]) == 0
    assert capsys.readouterr().out == "ab\nba\n"


def test_glyph_ramp_starting_with_dash(image_path, capsys):
    assert cli.main([str(image_path), "ASCII", "-=#"]) == 0
    assert capsys.readouterr().out == "-#\n#-\n"


def test_ascol_glyph_ramp_starting_with_dash(image_path, capsys):
    assert cli.main([str(image_path), "ASCOL", "7", "-@"]) == 0
    out = capsys.readouterr().out
    assert "-" in out and "@" in out


def test_double_dash_separates_ramp(image_path, capsys):
    assert cli.main([str(image_path), "ASCII", "--", "-v"]) == 0
    assert capsys.readouterr().out == "-v\nv-\n"


def test_unknown_long_option_still_rejected(image_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(image_path), "--sepia"])
    assert exc.value.code == 2
    assert "--sepia" in capsys.readouterr().err


def test_unwritable_log_file(image_path, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([str(image_path), "--log-file", str(tmp_path / "missing" / "dir" / "a.log")])
    assert exc.value.code == 2
    assert "cannot open log file" in capsys.readouterr().err
