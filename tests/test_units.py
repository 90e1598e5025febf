import pytest

from collage_layout.units import parse_aspect, parse_int, parse_size


def test_parse_int_strips_whitespace():
    assert parse_int("  10 ") == 10


def test_parse_int_rejects_empty():
    with pytest.raises(ValueError):
        parse_int("")


def test_parse_size():
    assert parse_size("1920x1080") == (1920, 1080)
    assert parse_size(" 640X480 ") == (640, 480)


@pytest.mark.parametrize("text", ["1920", "0x100", "axb", "1x2x3"])
def test_parse_size_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_size(text)


def test_parse_aspect_forms():
    assert parse_aspect("16:9") == pytest.approx(16 / 9)
    assert parse_aspect("1920x1080") == pytest.approx(16 / 9)
    assert parse_aspect("1,5") == 1.5
    assert parse_aspect("4/3") == pytest.approx(4 / 3)


@pytest.mark.parametrize("text", ["", "0", "-2", "16:0"])
def test_parse_aspect_rejects_non_positive(text):
    with pytest.raises(ValueError):
        parse_aspect(text)
