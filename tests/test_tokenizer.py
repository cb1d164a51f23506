from __future__ import annotations

import pytest

from pathnorm_mcp.core.tokenizer import split_path


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", []),
        ("/", ["/"]),
        ("//", ["/"]),
        ("///", ["/"]),
        ("a", ["a"]),
        ("/a", ["/", "a"]),
        ("a/b/c", ["a", "b", "c"]),
        ("/a/b/c", ["/", "a", "b", "c"]),
        (".", ["."]),
        ("/./..", ["/", ".", ".."]),
        ("a/", ["a"]),
        ("/a/b/", ["/", "a", "b"]),
        ("./", ["."]),
        ("C:", ["C:"]),
        ("C:/", ["C:"]),
        ("C:/./../..", ["C:", ".", "..", ".."]),
        ("a//b//c//", ["a", "b", "c"]),
        ("//a/b//c//", ["/", "a", "b", "c"]),
        ("\\\\a/b\\\\c\\\\", ["/", "a", "b", "c"]),
        ("a/\\/b", ["a", "b"]),
    ],
)
def test_split_path(raw, expected):
    assert split_path(raw) == expected


@pytest.mark.parametrize(
    "slashed, backslashed",
    [
        ("/", "\\"),
        ("/a", "\\a"),
        ("a/b", "a\\b"),
        ("a/b/c", "a\\b\\c"),
        ("/a/b", "\\a\\b"),
        ("/a/b/c", "\\a\\b\\c"),
        ("/.", "\\."),
        ("/./..", "\\.\\.."),
        ("/./../..", "\\.\\..\\.."),
        ("/a//", "\\a/"),
        ("a/b/", "a\\b\\"),
        ("a/b/c/", "a\\b\\c\\"),
        ("/a/b/", "\\a\\b\\"),
        ("/a/b/c/", "\\a\\b\\c\\"),
        ("./", ".\\"),
        ("/./", "\\.\\"),
        ("/./../", "\\.\\..\\"),
        ("/./../../", "\\.\\..\\..\\"),
    ],
)
def test_split_path_separator_equivalence(slashed, backslashed):
    assert split_path(slashed) == split_path(backslashed)


def test_split_path_keeps_illegal_characters():
    # validation happens later
    assert split_path("a<b/c:d") == ["a<b", "c:d"]


def test_split_path_root_marker_only_first():
    out = split_path("////x////y")
    assert out.count("/") == 1
    assert out[0] == "/"
