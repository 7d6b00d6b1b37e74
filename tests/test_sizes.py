"""Tests for byte-size humanization (mirrorfind/utils/sizes.py)."""

import pytest

from mirrorfind.utils.sizes import human_bytes


@pytest.mark.unit
class TestHumanBytes:
    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 B"),
            (9, "9 B"),
            (10, "10 B"),
            (999, "999 B"),
            (1000, "1.0 kB"),
            (1024, "1.0 kB"),
            (1500, "1.5 kB"),
            (2048, "2.0 kB"),
            (9999, "10 kB"),
            (15360, "15 kB"),
            (1000000, "1.0 MB"),
            (1048576, "1.0 MB"),
            (5 * 10**9, "5.0 GB"),
            (10**12, "1.0 TB"),
            (10**18, "1.0 EB"),
        ],
    )
    def test_boundaries(self, size, expected):
        assert human_bytes(size) == expected

    def test_larger_than_largest_unit(self):
        assert human_bytes(10**21) == "1000 EB"
