import pytest

from fsmodel.path_util import (
    is_at_mount_point,
    path_at_mount_point,
    remove_trailing_slashes,
    simplify_path_string,
    split_path,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("////", "/"),
        ("////foo", "/foo"),
        ("/////foo", "/foo"),
        ("../../../././././/////foo", "/foo"),
        ("../../", "/"),
        ("/../../", "/"),
        ("foo/bar/../", "/foo"),
        ("/////foo/////././././bar/../bar/..///../../", "/"),
        ("./foo/.../........", "/foo/.../........"),
        ("./foo/", "/foo"),
        ("./foo", "/foo"),
    ],
)
def test_path_simplification(raw, expected):
    assert simplify_path_string(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/a/b/c/d", ("/a/b/c", "d")),
        ("/a/b////c/d", ("/a/b/c", "d")),
        ("/", ("/", "")),
        ("a", ("/", "a")),
    ],
)
def test_split_simplified_path(raw, expected):
    assert split_path(simplify_path_string(raw)) == expected


def test_split_unsimplified_relative_path():
    assert split_path("a") == ("", "a")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("////../", None),
        ("/dev/a/foo/bar/", "/foo/bar"),
        ("/dev/a/foo/../bar/", "/bar"),
        ("/dev/a/foo/../bar////", "/bar"),
        ("/dev/a////foo/../../", None),
        ("/dev/b/foo/../bar/bar2/", None),
        ("/dev/b/foo/../bar/bar2", None),
        ("/foo/dev/b/foo/bar/../", None),
        ("/dev/a/../a/fioo", "/fioo"),
    ],
)
def test_path_at_mount_point(raw, expected):
    simplified = simplify_path_string(raw)
    if expected is None:
        with pytest.raises(ValueError):
            path_at_mount_point(simplified, "/dev/a")
        assert not is_at_mount_point(simplified, "/dev/a")
    else:
        assert path_at_mount_point(simplified, "/dev/a") == expected
        assert is_at_mount_point(simplified, "/dev/a")


@pytest.mark.parametrize(
    "raw, expected",
    [("/", "/"), ("///", "/"), ("/foo//", "/foo"), ("foo", "foo"), ("", "")],
)
def test_remove_trailing_slashes(raw, expected):
    assert remove_trailing_slashes(raw) == expected


def test_simplify_is_idempotent():
    for raw in ["/a/./b/../c//", "x/y/z", "../..", "/dev/a/"]:
        once = simplify_path_string(raw)
        assert simplify_path_string(once) == once
        assert once.startswith("/")