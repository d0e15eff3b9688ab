"""Tests for app/utils/file_size.py"""

import pytest

from app.utils.file_size import format_file_size


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1048576, "1 MB"),
        (5 * 1024 ** 3, "5 GB"),
    ],
)
def test_binary_units(size, expected):
    assert format_file_size(size) == expected


def test_two_decimal_places():
    # 1234567 / 1024^2 = 1.1773...
    assert format_file_size(1234567) == "1.18 MB"


def test_clamped_to_gigabytes():
    assert format_file_size(2048 * 1024 ** 3) == "2048 GB"


def test_negative_treated_as_zero():
    assert format_file_size(-10) == "0 B"
