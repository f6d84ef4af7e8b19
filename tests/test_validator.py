"""Tests for word and file name checks."""

import pytest

from validator import is_file_name, is_word


@pytest.mark.parametrize(
    "word, length, expected",
    [
        ("", 0, True),
        ("", None, False),
        ("t5nt", None, False),
        ("te*t", None, False),
        ("bicyc!e", 7, False),
        ("bicycle", 4, False),
        ("       ", 7, False),
        ("tent", 4, True),
        ("tent", None, True),
        ("bicycle", 7, True),
    ],
)
def test_is_word(word, length, expected):
    if length is None:
        assert is_word(word) is expected
    else:
        assert is_word(word, length) is expected


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("", False),
        ("bicycle", True),
        ("testdata1.txt", True),
        ("testdata2.txt  ", False),
        ("  testdata3.txt", False),
        ("ResultFile****.txt", False),
        ("C:\\test.dat", False),
        ("C:\\t*st.dat", False),
        ("results/test.dat", False),
        ("/tmp/test.dat", False),
    ],
)
def test_is_file_name(file_name, expected):
    assert is_file_name(file_name) is expected
