"""
Shared descriptors for the test suite.
"""

import pytest

from typewarden import (
    Number,
    String,
    dict_of,
    interface,
    intersection,
    list_of,
    refinement,
    struct,
)


@pytest.fixture
def point():
    return struct({"x": Number, "y": Number}, "Point")


@pytest.fixture
def point_interface():
    return interface({"x": Number, "y": Number}, "PointInterface")


@pytest.fixture
def url():
    return refinement(String, lambda s: s.startswith("http://"), "URL")


@pytest.fixture
def tags():
    return list_of(String, "Tags")


@pytest.fixture
def min_max():
    min_len = refinement(String, lambda s: len(s) > 2, "Min")
    max_len = refinement(String, lambda s: len(s) < 5, "Max")
    return intersection([min_len, max_len], "MinMax")


@pytest.fixture
def key_value_dict():
    key = refinement(String, lambda k: len(k) >= 2, "Key")
    value = refinement(Number, lambda n: n >= 0, "Value")
    return dict_of(key, value, "Dict")
