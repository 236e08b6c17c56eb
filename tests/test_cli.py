import pytest
from PIL import Image

from rasterfx.cli import main
from rasterfx.filters import apply_filter
from rasterfx.io import read_image


@pytest.fixture
def input_png(tmp_path):
    path = tmp_path / "in.png"
    img = Image.new("RGB", (2, 2))
    img.putdata([(0, 0, 0), (255, 255, 255), (128, 128, 128), (64, 64, 64)])
    img.save(path)
    return path


def test_missing_flags_print_usage(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_invalid_format_prints_usage(capsys):
    assert main(["-img", "a.png", "-fmt", "gif", "-out", "o"]) == 0
    assert "usage" in capsys.readouterr().out


def test_unknown_flag_prints_usage(capsys):
    assert main(["--bogus"]) == 0
    assert "usage" in capsys.readouterr().out


def test_unknown_operation_fails_before_reading(tmp_path):
    # plik nie istnieje, ale błąd dotyczy nazwy operacji
    rc = main(["-img", str(tmp_path / "none.png"), "-fmt", "png",
               "-out", str(tmp_path / "o"), "-op", "Blur"])
    assert rc == 1
    assert not (tmp_path / "o.png").exists()


def test_missing_input_file(tmp_path):
    rc = main(["-img", str(tmp_path / "none.png"), "-fmt", "png", "-out", str(tmp_path / "o")])
    assert rc == 1


def test_sobel_reports_error(tmp_path, input_png):
    rc = main(["-img", str(input_png), "-fmt", "png", "-out", str(tmp_path / "o"),
               "-op", "FindEdgesWithSobel"])
    assert rc == 1
    assert not (tmp_path / "o.png").exists()


def test_extract_red_to_png(tmp_path, input_png):
    rc = main(["-img", str(input_png), "-fmt", "png", "-out", str(tmp_path / "red"),
               "-op", "ExtractRedChannel"])
    assert rc == 0
    assert read_image(str(tmp_path / "red.png")).pixels == [
        (0, 0, 0, 255),
        (255, 0, 0, 255),
        (128, 0, 0, 255),
        (64, 0, 0, 255),
    ]


def test_default_operation_to_jpeg(tmp_path, input_png):
    rc = main(["--img", str(input_png), "--fmt", "jpg", "--out", str(tmp_path / "eq"), "-v"])
    assert rc == 0
    assert (tmp_path / "eq.jpeg").exists()


def test_help_returns_zero(capsys):
    assert main(["-h"]) == 0
    assert "usage" in capsys.readouterr().out
    assert main(["--help", "-img", "a.png", "-fmt", "png", "-out", "o"]) == 0


def test_omitted_op_runs_histogram_normalization(tmp_path):
    src = tmp_path / "colors.png"
    img = Image.new("RGB", (3, 2))
    img.putdata([(10, 20, 30), (200, 40, 40), (90, 90, 90),
                 (0, 120, 250), (250, 250, 200), (60, 30, 0)])
    img.save(src)

    rc = main(["-img", str(src), "-fmt", "png", "-out", str(tmp_path / "eq")])
    assert rc == 0
    expected = apply_filter("HistogramNormalization", read_image(str(src)))
    written = read_image(str(tmp_path / "eq.png"))
    assert written.pixels == expected.pixels
    assert written.pixels != read_image(str(src)).pixels
