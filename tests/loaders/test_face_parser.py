"""Tests for face statement decoding."""

import pytest

from objbuffer.core.errors import IntParseError, InvalidFormatError
from objbuffer.loaders.face_parser import parse_face, parse_index, parse_vertex_key


def test_parse_face():
    keys = parse_face(["1/2/3", "4/5/6", "7/8/9"])
    assert keys == ((1, 2, 3), (4, 5, 6), (7, 8, 9))


@pytest.mark.parametrize("tokens", [
    ["1/1/1", "2/2/2"],
    ["1/1/1", "2/2/2", "3/3/3", "4/4/4"],
    [],
])
def test_face_must_be_triangle(tokens):
    with pytest.raises(InvalidFormatError):
        parse_face(tokens)


@pytest.mark.parametrize("token", ["1", "1/2", "1/2/3/4"])
def test_vertex_key_arity(token):
    with pytest.raises(InvalidFormatError):
        parse_vertex_key(token)


@pytest.mark.parametrize("token", ["1//3", "a/1/1", "-1/1/1", "1/1/1.0"])
def test_vertex_key_bad_component(token):
    with pytest.raises(IntParseError):
        parse_vertex_key(token)


def test_zero_component_is_not_rejected_here():
    # Bounds are checked by the resolver, not the decoder.
    assert parse_vertex_key("0/1/1") == (0, 1, 1)


def test_parse_index():
    assert parse_index("42") == 42
    assert parse_index("+7") == 7
    with pytest.raises(IntParseError):
        parse_index("")
    with pytest.raises(IntParseError):
        parse_index("1_0")


@pytest.mark.parametrize("token", ["9" * 30, "9" * 5000, "18446744073709551616"])
def test_oversized_index(token):
    with pytest.raises(IntParseError):
        parse_index(token)
    with pytest.raises(IntParseError):
        parse_vertex_key(f"1/1/{token}")


def test_largest_index_accepted():
    assert parse_index("18446744073709551615") == 2**64 - 1
    assert parse_index("0" * 40 + "7") == 7


def test_non_ascii_digits_rejected():
    with pytest.raises(IntParseError):
        parse_index("١")
