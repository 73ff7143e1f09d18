"""Tests for version helpers"""

import pytest

from dev_kit.api.exceptions import InvalidVersionFormatError
from dev_kit.utils.version_utils import compare_versions, increment_patch, is_valid_version, split_version


@pytest.mark.parametrize("current, expected", [
    ("1.0.0", "1.0.1"),
    ("2.9.9", "2.9.10"),
    ("0.0.99", "0.0.100"),
])
def test_increment_patch(current, expected):
    assert increment_patch(current) == expected


@pytest.mark.parametrize("bad", ["1.0", "1.0.0.0", "1.0.x", "v1.0.0", "1.0.0-beta", ""])
def test_increment_rejects_non_triples(bad):
    with pytest.raises(InvalidVersionFormatError):
        increment_patch(bad)


def test_split_version():
    assert split_version("3.12.7") == (3, 12, 7)


def test_is_valid_version():
    assert is_valid_version("10.0.1")
    assert not is_valid_version("10.0")


def test_compare_versions_is_numeric():
    assert compare_versions("1.10.0", "1.9.0") == 1
    assert compare_versions("1.0.0", "1.0.1") == -1
    assert compare_versions("2.0.0", "2.0.0") == 0
