"""Tests for vfsexplorer.paths module."""

import pytest

from vfsexplorer.paths import ROOT, is_root, parent_of


class TestParentOf:
    def test_root_is_fixed_point(self):
        assert parent_of("/") == "/"
        assert parent_of(parent_of("/")) == "/"

    def test_top_level_directory(self):
        assert parent_of("/home") == ROOT

    def test_removes_last_segment(self):
        assert parent_of("/home/user") == "/home"

    def test_deep_path(self):
        assert parent_of("/a/b/c/d") == "/a/b/c"

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/home/user/", "/home/user"),
            ("/a//b", "/a/"),
            ("relative/dir/x", "relative/dir"),
            ("relative/dir", "/"),
            ("", "/"),
            ("name", "/"),
        ],
    )
    def test_keeps_separator_structure(self, path, expected):
        assert parent_of(path) == expected

    def test_repeated_application_reaches_root(self):
        path = "/usr/local/share"
        for _ in range(5):
            path = parent_of(path)
        assert path == ROOT


class TestIsRoot:
    def test_root(self):
        assert is_root("/")

    def test_not_root(self):
        assert not is_root("/home")
        assert not is_root(None)
