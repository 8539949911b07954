"""Unit tests for confstore.config.values."""

import math

import pytest

from confstore import ConfigStore, TypeMismatch
from confstore.config.values import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    ValueKind,
    describe,
    is_kind,
    kind_of,
    to_int64,
    to_slice,
    to_string,
    to_uint64,
)


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (False, ValueKind.BOOL),
        (0, ValueKind.INT),
        (1.5, ValueKind.FLOAT),
        ("", ValueKind.STRING),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({}, ValueKind.MAPPING),
        (ConfigStore(), ValueKind.MAPPING),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_kind_of_rejects_unsupported_objects():
    with pytest.raises(TypeMismatch, match="set is not a configuration value"):
        kind_of({1, 2})


def test_describe():
    assert describe(3) == "int"
    assert describe(b"raw") == "bytes"


def test_is_kind():
    assert is_kind({"a": 1}, ValueKind.MAPPING)
    assert not is_kind(object(), ValueKind.MAPPING)


def test_to_string():
    assert to_string("abc", "k") == "abc"
    with pytest.raises(TypeMismatch, match="Configuration parameter k is null, expected string"):
        to_string(None, "k")


def test_to_int64_truncates_toward_zero():
    assert to_int64(3.9, "k") == 3
    assert to_int64(-3.9, "k") == -3
    assert to_int64(-0.5, "k") == 0


def test_to_int64_bounds():
    assert to_int64(INT64_MAX, "k") == INT64_MAX
    assert to_int64(INT64_MIN, "k") == INT64_MIN
    with pytest.raises(TypeMismatch):
        to_int64(INT64_MAX + 1, "k")
    with pytest.raises(TypeMismatch):
        to_int64(INT64_MIN - 1, "k")


def test_to_int64_rejects_bool_and_nan():
    with pytest.raises(TypeMismatch, match="is bool"):
        to_int64(True, "k")
    with pytest.raises(TypeMismatch):
        to_int64(math.nan, "k")


def test_to_uint64_bounds():
    assert to_uint64(UINT64_MAX, "k") == UINT64_MAX
    assert to_uint64(0.7, "k") == 0
    with pytest.raises(TypeMismatch):
        to_uint64(UINT64_MAX + 1, "k")
    with pytest.raises(TypeMismatch):
        to_uint64(-1, "k")


def test_to_uint64_rejects_numeric_strings():
    with pytest.raises(TypeMismatch, match="is string, expected uint64"):
        to_uint64("10", "k")


def test_to_slice():
    assert to_slice(("a", "b"), "k", to_string) == ["a", "b"]
    with pytest.raises(TypeMismatch, match="expected sequence"):
        to_slice("ab", "k", to_string)
    with pytest.raises(TypeMismatch, match=r"k\[1\]"):
        to_slice([1, "x"], "k", to_int64)
