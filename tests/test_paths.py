"""
Tests for typewarden.paths.
"""

import pytest

from typewarden import parse_path, render_json_path, render_path, validate, String
from typewarden.paths import extend_path, to_path


class TestRenderPath:
    def test_root(self):
        assert render_path(()) == "value"
        assert render_json_path(()) == "value"

    def test_keys_and_indices(self):
        assert render_path(("points", 0, "x")) == "points[0].x"
        assert render_path((0, "x")) == "[0].x"
        assert render_path(("matrix", 1, 2)) == "matrix[1][2]"

    def test_non_identifier_keys(self):
        assert render_path(("headers", "content-type")) == 'headers["content-type"]'
        assert render_path(("1abc",)) == '["1abc"]'

    def test_json_path(self):
        assert render_json_path(("points", 0, "x")) == '["points"][0]["x"]'


class TestParsePath:
    def test_empty(self):
        assert parse_path("") == ()

    def test_round_trip(self):
        for path in [("points", 0, "x"), (0, "x"), ("headers", "content-type"), ("a", 'q"uote')]:
            assert parse_path(render_path(path)) == path

    @pytest.mark.parametrize("text", ["a..b", "a[x]", "a b", "[-1]", ".a", "a."])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_path(text)


class TestExtendPath:
    def test_does_not_mutate(self):
        base = ("a",)
        left = extend_path(base, 0)
        right = extend_path(base, "b")
        assert base == ("a",)
        assert left == ("a", 0)
        assert right == ("a", "b")


class TestToPath:
    def test_accepted_forms(self):
        assert to_path(None) == ()
        assert to_path(["a", 0]) == ("a", 0)
        assert to_path(("a",)) == ("a",)
        assert to_path("a[0]") == ("a", 0)

    @pytest.mark.parametrize("value", [5, ["a", -1], ["a", 1.5], [True]])
    def test_rejected_forms(self, value):
        with pytest.raises(TypeError):
            to_path(value)

    def test_string_start_path_in_validate(self):
        err = validate(1, String, path="user.tags[0]").first_error()
        assert err.path == ("user", "tags", 0)
        assert err.message == "Invalid value 1 supplied to user.tags[0] (expected String)"
