import pytest

from imagemerge.compose import ImageOverlapError, compose_image


def test_layout():
    prog = bytes(range(1, 11))
    fs = b"\xAA\xBB\xCC\xDD"
    image = compose_image(prog, fs, 64, 0xFF)

    assert len(image) == 64 + len(fs)
    assert image[:10] == prog
    assert image[10:64] == b"\xFF" * 54
    assert image[64:] == fs


def test_default_fill_is_zero():
    image = compose_image(b"\x01", b"\x02", 4)
    assert bytes(image) == b"\x01\x00\x00\x00\x02"


def test_program_exactly_fills_gap():
    image = compose_image(b"\x11" * 8, b"\x22" * 2, 8, 0xFF)
    assert bytes(image) == b"\x11" * 8 + b"\x22" * 2


def test_overlap_rejected():
    with pytest.raises(ImageOverlapError, match="9 bytes"):
        compose_image(b"\x00" * 9, b"\x01", 8)


def test_overlap_is_value_error():
    assert issubclass(ImageOverlapError, ValueError)


@pytest.mark.parametrize("fill", [-1, 0x100])
def test_bad_fill(fill):
    with pytest.raises(ValueError):
        compose_image(b"", b"\x01", 4, fill)


def test_negative_offset():
    with pytest.raises(ValueError):
        compose_image(b"", b"\x01", -4)
