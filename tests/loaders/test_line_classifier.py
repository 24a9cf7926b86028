"""Tests for OBJ line classification."""

import dataclasses

import pytest

from objbuffer.loaders.line_classifier import Statement, classify_lines, is_recognized


def test_keyword_and_tokens():
    stmts = list(classify_lines("v 1 2 3\nvt 0.5 0.5"))
    assert stmts == [
        Statement("v", ("1", "2", "3"), 1),
        Statement("vt", ("0.5", "0.5"), 2),
    ]


def test_blank_lines_skipped():
    stmts = list(classify_lines("\n   \n\t\nv 1 2 3\n\n"))
    assert len(stmts) == 1
    assert stmts[0].keyword == "v"
    assert stmts[0].line_number == 4


def test_lowercases_keyword_and_payload():
    (stmt,) = classify_lines("VN 1E2 0 0")
    assert stmt.keyword == "vn"
    assert stmt.tokens == ("1e2", "0", "0")


def test_whitespace_runs():
    (stmt,) = classify_lines("  f\t1/1/1   2/2/2 \t 3/3/3  ")
    assert stmt.tokens == ("1/1/1", "2/2/2", "3/3/3")


def test_crlf_line_endings():
    stmts = list(classify_lines("v 1 2 3\r\nv 4 5 6\r\n"))
    assert [s.tokens for s in stmts] == [("1", "2", "3"), ("4", "5", "6")]


def test_unknown_keywords_are_yielded():
    stmts = list(classify_lines("# comment\no MeshName\nusemtl red"))
    assert [s.keyword for s in stmts] == ["#", "o", "usemtl"]
    assert not any(is_recognized(s.keyword) for s in stmts)


def test_recognized_keywords():
    for kw in ("v", "vt", "vn", "f"):
        assert is_recognized(kw)
    assert not is_recognized("vp")


def test_statement_is_immutable_and_hashable():
    (stmt,) = classify_lines("v 1 2 3")
    assert isinstance(stmt.tokens, tuple)
    assert hash(stmt) == hash(Statement("v", ("1", "2", "3"), 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        stmt.tokens = ("4",)
