import pytest

from imagemerge.sizefmt import format_size


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 bytes"),
    (1, "1 bytes"),
    (1023, "1023 bytes"),
    (1024, "1.00 kilobytes"),
    (1536, "1.50 kilobytes"),
    (524292, "512.00 kilobytes"),
    (1048576, "1.00 megabytes"),
    (3 * 1024 * 1024 // 2, "1.50 megabytes"),
])
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected


def test_format_size_stays_in_megabytes():
    assert format_size(1024 ** 3) == "1024.00 megabytes"
